"""
Duplicate bags: mappings from a key to the list of values stored under it.

A bag is a plain `dict` whose values are lists, so it can be printed, compared and passed around
without any wrapping. The functions in this module never modify their arguments; each of them
returns a fresh `dict` reflecting the change. Only the list under the changed key is rebuilt, the
other lists are shared with the input bag, since nothing in the library mutates a stored list.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from itertools import chain
from typing import Any, Callable, Dict, Iterable, List, Set, Tuple, TypeVar

from dupbags.utils.config import get_active_config

KeyT = TypeVar("KeyT", bound=Hashable)
ValueT = TypeVar("ValueT")

Bag = Dict[KeyT, List[ValueT]]


def check_bag(bag: Any, name: str = "bag") -> None:
    """Raise `TypeError` if `bag` cannot be used as a bag."""
    if not isinstance(bag, Mapping):
        raise TypeError(f"{name} must be a mapping, got {type(bag).__name__}")


def new() -> Bag:
    """Creates a new empty bag."""
    return {}


def put(bag: Mapping[KeyT, Sequence[ValueT]], key: KeyT, value: ValueT) -> Bag[KeyT, ValueT]:
    """
    Adds a value to the bag under the given key.

    If the key is absent it starts a new single-element list, otherwise the value is appended to
    the existing list. The input bag is left unchanged; only the list under `key` is rebuilt, the
    other lists are shared with the input.
    """
    check_bag(bag)
    result = dict(bag)
    result[key] = [*bag.get(key, ()), value]
    return result


def get(bag: Mapping[KeyT, Sequence[ValueT]], key: KeyT) -> List[ValueT]:
    """Gets all values stored under `key` in insertion order, or `[]` if the key is absent."""
    check_bag(bag)
    return list(bag.get(key, []))


def keys(bag: Mapping[KeyT, Sequence[ValueT]]) -> Set[KeyT]:
    """Gets all keys of the bag, including the ones mapped to an empty list."""
    check_bag(bag)
    return set(bag.keys())


def values(bag: Mapping[KeyT, Sequence[ValueT]]) -> List[ValueT]:
    """
    Gets all values from the bag, flattened into a single list.

    Values stored under the same key keep their relative order; the order across keys follows the
    iteration order of the mapping and should not be relied upon.
    """
    check_bag(bag)
    return list(chain.from_iterable(bag.values()))


def update(
    bag: Mapping[KeyT, Sequence[ValueT]],
    key: KeyT,
    transform: Callable[[List[ValueT]], Sequence[ValueT]],
) -> Bag[KeyT, ValueT]:
    """
    Replaces the values under `key` with the result of `transform`.

    `transform` receives a copy of the current values (an empty list if the key is absent) and
    should return the new list of values. Anything `transform` raises propagates to the caller;
    since the input bag is never modified there is nothing to roll back.
    """
    check_bag(bag)
    if not callable(transform):
        raise TypeError(f"transform must be callable, got {type(transform).__name__}")

    new_values = transform(get(bag, key))
    if get_active_config().check_update_results and (
        not isinstance(new_values, Sequence) or isinstance(new_values, (str, bytes))
    ):
        raise TypeError(
            f"transform must return a sequence of values, got {type(new_values).__name__}"
        )

    result = dict(bag)
    result[key] = list(new_values)
    return result


def from_pairs(pairs: Iterable[Tuple[KeyT, ValueT]]) -> Bag[KeyT, ValueT]:
    """Builds a bag by putting every `(key, value)` pair in turn."""
    result: Bag[KeyT, ValueT] = {}
    for key, value in pairs:
        result.setdefault(key, []).append(value)
    return result
