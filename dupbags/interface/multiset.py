from collections import Counter
from collections.abc import Collection, Hashable, Mapping
from typing import Dict, Generic, Iterable, Iterator, Sequence, TypeVar

ElementT = TypeVar("ElementT", bound=Hashable)
KeyT = TypeVar("KeyT", bound=Hashable)


class Multiset(Collection, Generic[ElementT]):
    """Class representing a frozen multi-set (i.e. set where elements are allowed to repeat).

    The elements are internally stored as a frequency table, so unlike a sorted tuple the elements
    only need to be hashable, not comparable. This makes it possible to compare value lists holding
    e.g. `None`, `int` and `str` side by side, which cannot be sorted in Python 3.
    """

    def __init__(self, values: Iterable[ElementT]) -> None:
        try:
            self._counts: Counter = Counter(values)
        except TypeError as e:
            raise TypeError("Cannot build a multiset: all elements must be hashable") from e

    def __iter__(self) -> Iterator:
        return self._counts.elements()

    def __contains__(self, element) -> bool:
        try:
            return self._counts[element] > 0
        except TypeError:  # unhashable, so it cannot be an element
            return False

    def __eq__(self, other) -> bool:
        if isinstance(other, Multiset):
            return self._counts == other._counts
        else:
            return False

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __repr__(self) -> str:
        return f"Multiset({list(self)!r})"

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))

    def count(self, element) -> int:
        """Number of times `element` occurs (zero if it does not occur at all)."""
        return self._counts[element]


def as_multisets(bag: Mapping[KeyT, Sequence]) -> Dict[KeyT, Multiset]:
    """Convert every value list of a bag into a `Multiset`, for order-insensitive comparison.

    Keys mapped to empty sequences are kept (as empty multisets).
    """
    if not isinstance(bag, Mapping):
        raise TypeError(f"Bag must be a mapping, got {type(bag).__name__}")
    return {key: Multiset(values) for key, values in bag.items()}
