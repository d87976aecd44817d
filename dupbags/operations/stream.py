"""
Lazy versions of the set operations on bags.

Each producer checks its arguments straight away and returns a generator of `(key, result)` pairs.
The key list of the source bag(s) is taken when the producer is called, but the frequency counting
for a key only happens when its entry is pulled, so memory use is bounded by the largest single
value list rather than by the size of the whole result. Generators are single-pass: to iterate
again, call the producer again.
"""

from __future__ import annotations

from typing import Iterator, List, Mapping, NamedTuple, Sequence, Tuple

from more_itertools import partition

from dupbags.interface.bag import check_bag
from dupbags.operations.counting import bag_intersect, bag_subtract, bag_symmetric_difference
from dupbags.utils.log import PER_KEY_LOG_LEVEL, get_logger

logger = get_logger(__name__)

BagLike = Mapping[object, Sequence]
Entry = Tuple[object, List]


class ReconciliationStreams(NamedTuple):
    """Three independent streams which can be consumed in any order, or interleaved."""

    common: Iterator[Entry]
    only_first: Iterator[Entry]
    only_second: Iterator[Entry]


def _log_entry(operation: str, key, result) -> None:
    if logger.isEnabledFor(PER_KEY_LOG_LEVEL):
        logger.log(PER_KEY_LOG_LEVEL, f"{operation}: key {key!r} -> {result!r}")


def _intersect_entries(bag1: BagLike, bag2: BagLike, keys: List) -> Iterator[Tuple[object, Tuple]]:
    for key in keys:
        result = (list(bag1[key]), list(bag2[key]))
        _log_entry("intersect", key, result)
        yield key, result


def _intersect_values_entries(bag1: BagLike, bag2: BagLike, keys: List) -> Iterator[Entry]:
    for key in keys:
        values = bag_intersect(bag1[key], bag2[key])
        _log_entry("common", key, values)
        if values:
            yield key, values


def _difference_entries(bag1: BagLike, bag2: BagLike, keys: List) -> Iterator[Entry]:
    for key in keys:
        values = bag_subtract(bag1[key], bag2.get(key, []))
        _log_entry("difference", key, values)
        if values:
            yield key, values


def _symmetric_difference_entries(
    bag1: BagLike, bag2: BagLike, keys1: List, keys2: List
) -> Iterator[Entry]:
    # `partition` yields the items failing the predicate first.
    only_in_bag1, common_keys = partition(lambda key: key in bag2, keys1)
    only_in_bag1, common_keys = list(only_in_bag1), list(common_keys)

    for key in only_in_bag1:
        values = list(bag1[key])
        _log_entry("symmetric_difference (only first)", key, values)
        if values:
            yield key, values

    for key in keys2:
        if key not in bag1:
            values = list(bag2[key])
            _log_entry("symmetric_difference (only second)", key, values)
            if values:
                yield key, values

    for key in common_keys:
        values = bag_symmetric_difference(bag1[key], bag2[key])
        _log_entry("symmetric_difference", key, values)
        if values:
            yield key, values


def _common_keys(bag1: BagLike, bag2: BagLike) -> List:
    return [key for key in bag1 if key in bag2]


def intersect_stream(bag1: BagLike, bag2: BagLike) -> Iterator[Tuple[object, Tuple[List, List]]]:
    """
    Lazy version of `intersect`: yields `(key, (values_from_bag1, values_from_bag2))` for every key
    present in both bags.
    """
    check_bag(bag1, "bag1")
    check_bag(bag2, "bag2")
    return _intersect_entries(bag1, bag2, _common_keys(bag1, bag2))


def difference_stream(bag1: BagLike, bag2: BagLike) -> Iterator[Entry]:
    """Lazy version of `difference`: yields `(key, remaining_values)` for keys of `bag1`."""
    check_bag(bag1, "bag1")
    check_bag(bag2, "bag2")
    return _difference_entries(bag1, bag2, list(bag1))


def symmetric_difference_stream(bag1: BagLike, bag2: BagLike) -> Iterator[Entry]:
    """
    Lazy version of `symmetric_difference`.

    Keys only in `bag1` come first, then keys only in `bag2`, then keys shared by both.
    """
    check_bag(bag1, "bag1")
    check_bag(bag2, "bag2")
    return _symmetric_difference_entries(bag1, bag2, list(bag1), list(bag2))


def common_values_stream(bag1: BagLike, bag2: BagLike) -> Iterator[Entry]:
    """Yields `(key, shared_values)` with the multiset intersection of the values of shared keys."""
    check_bag(bag1, "bag1")
    check_bag(bag2, "bag2")
    return _intersect_values_entries(bag1, bag2, _common_keys(bag1, bag2))


def reconcile_stream(bag1: BagLike, bag2: BagLike) -> ReconciliationStreams:
    """
    Lazy version of `reconcile`, similar to a full outer join.

    Note that `common` holds the multiset intersection of the values (as in `reconcile`), not the
    pairs of value lists produced by `intersect_stream`.
    """
    return ReconciliationStreams(
        common=common_values_stream(bag1, bag2),
        only_first=difference_stream(bag1, bag2),
        only_second=difference_stream(bag2, bag1),
    )
