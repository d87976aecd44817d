"""
Set operations on bags, with multiset semantics for the values under each key.

These are materialized versions of the producers in `dupbags.operations.stream`, so the eager and
lazy variants always agree. None of the functions modifies its inputs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Tuple

from dupbags.interface.bag import Bag
from dupbags.operations.stream import (
    BagLike,
    common_values_stream,
    difference_stream,
    intersect_stream,
    symmetric_difference_stream,
)
from dupbags.utils.log import VERBOSE_LOG_LEVEL, get_logger

logger = get_logger(__name__)


class Reconciliation(NamedTuple):
    """Result of `reconcile`; unpacks like a `(common, only_first, only_second)` tuple."""

    common: Bag
    only_first: Bag
    only_second: Bag


def _materialize(operation: str, entries: Iterable[Tuple]) -> Dict:
    result = dict(entries)
    if logger.isEnabledFor(VERBOSE_LOG_LEVEL):
        logger.log(VERBOSE_LOG_LEVEL, f"{operation} produced {len(result)} keys")
    return result


def intersect(bag1: BagLike, bag2: BagLike) -> Dict[object, Tuple[List, List]]:
    """
    Returns the keys present in both bags, each mapped to the pair of value lists
    `(values_from_bag1, values_from_bag2)`.

    The values are not merged: this answers "what do both sides claim for this key", so that e.g.
    value-level drift can be detected for matching keys. A key is considered present even if its
    list is empty. Use `reconcile` to get the values actually shared by both sides.
    """
    return _materialize("intersect", intersect_stream(bag1, bag2))


def difference(bag1: BagLike, bag2: BagLike) -> Bag:
    """
    Returns, for each key of `bag1`, the values of `bag1` minus the values of `bag2` (counting
    multiplicity). Keys left with no values are dropped.
    """
    return _materialize("difference", difference_stream(bag1, bag2))


def symmetric_difference(bag1: BagLike, bag2: BagLike) -> Bag:
    """
    Returns the values found in one bag but not the other.

    Keys present in only one bag keep their values as they are; for shared keys each value is
    repeated `abs(count_in_bag1 - count_in_bag2)` times. Keys left with no values are dropped.
    """
    return _materialize("symmetric_difference", symmetric_difference_stream(bag1, bag2))


def reconcile(bag1: BagLike, bag2: BagLike) -> Reconciliation:
    """
    Splits two bags similarly to SQL's FULL OUTER JOIN.

    Returns:
        `common`: for shared keys, the values present in both (multiset intersection),
        `only_first`: `difference(bag1, bag2)`,
        `only_second`: `difference(bag2, bag1)`.
        A key can appear in more than one part if some of its values are shared and some are not.
    """
    return Reconciliation(
        common=_materialize("reconcile (common)", common_values_stream(bag1, bag2)),
        only_first=_materialize("reconcile (only first)", difference_stream(bag1, bag2)),
        only_second=_materialize("reconcile (only second)", difference_stream(bag2, bag1)),
    )
