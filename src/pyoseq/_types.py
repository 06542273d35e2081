from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import NamedTuple

type Producer[T] = Callable[[], Iterator[T]]
"""A zero-argument factory returning a fresh `Iterator` on each call.

Calling it twice yields the same values, unless it closes over external mutable state."""
type Predicate[T] = Callable[[T], bool]
"""A function deciding whether an element is kept, taken, skipped or matched."""


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration.

    See `Iter.enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"


class Item[K, V](NamedTuple):
    """Represents a key-value pair from a `Mapping`.

    See `into_iter()` for details.
    """

    key: K
    """The key of the item."""
    value: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key.__repr__()}, {self.value.__repr__()})"
