"""
Multiset comparison of two value lists.

Every function builds a frequency table (value -> number of occurrences) per input and derives the
result counts from it. Results are emitted in frequency table order, i.e. in order of first
occurrence in `a` followed by values first seen in `b`; callers should not rely on it.
"""

from collections import Counter
from itertools import chain, repeat
from typing import Iterable, List, TypeVar

ValueT = TypeVar("ValueT")


def frequencies(values: Iterable[ValueT]) -> Counter:
    """Count the occurrences of each distinct value."""
    try:
        return Counter(values)
    except TypeError as e:
        raise TypeError(f"Cannot count values ({e}): values must be hashable") from e


def _expand(counts: Counter) -> List:
    return list(chain.from_iterable(repeat(value, n) for value, n in counts.items() if n > 0))


def bag_intersect(a: Iterable[ValueT], b: Iterable[ValueT]) -> List[ValueT]:
    """Values present in both inputs, each repeated `min(count_in_a, count_in_b)` times."""
    counts_a, counts_b = frequencies(a), frequencies(b)
    return _expand(Counter({v: min(n, counts_b[v]) for v, n in counts_a.items() if v in counts_b}))


def bag_subtract(a: Iterable[ValueT], b: Iterable[ValueT]) -> List[ValueT]:
    """Values of `a`, each repeated `max(0, count_in_a - count_in_b)` times."""
    counts_a, counts_b = frequencies(a), frequencies(b)
    return _expand(Counter({v: n - counts_b[v] for v, n in counts_a.items()}))


def bag_symmetric_difference(a: Iterable[ValueT], b: Iterable[ValueT]) -> List[ValueT]:
    """Values of either input, each repeated `abs(count_in_a - count_in_b)` times."""
    counts_a, counts_b = frequencies(a), frequencies(b)
    all_values = chain(counts_a, (v for v in counts_b if v not in counts_a))
    return _expand(Counter({v: abs(counts_a[v] - counts_b[v]) for v in all_values}))
