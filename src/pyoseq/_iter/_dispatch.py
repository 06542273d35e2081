from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from .. import _gen
from .._types import Item, Producer
from ._double import DoubleEndedIter
from ._main import Iter
from ._sized import ExactSizeIter


def _reversed[T](data: Sequence[T]) -> Producer[T]:
    def _rgen() -> Iterator[T]:
        return reversed(data)

    return _rgen


def _items[K, V](data: Mapping[K, V]) -> Producer[Item[K, V]]:
    def _gen_items() -> Iterator[Item[K, V]]:
        return (Item(k, v) for k, v in data.items())

    return _gen_items


@overload
def into_iter[T](data: Iter[T]) -> Iter[T]: ...
@overload
def into_iter[T](data: Sequence[T]) -> DoubleEndedIter[T]: ...
@overload
def into_iter[K, V](data: Mapping[K, V]) -> ExactSizeIter[Item[K, V]]: ...
@overload
def into_iter[T](data: Collection[T]) -> ExactSizeIter[T]: ...
@overload
def into_iter[T](data: Iterable[T]) -> Iter[T]: ...
@overload
def into_iter[T](data: Callable[[], Iterator[T]]) -> Iter[T]: ...
def into_iter(data: Any) -> Iter[Any]:
    """Wrap **data** in the most capable iterator tier its shape supports.

    - An `Iter` is returned as is.
    - A `Sequence` (`list`, `tuple`, `str`, `range`, ...) gives a `DoubleEndedIter`, traversing it by index from either end.
    - A `Mapping` gives an `ExactSizeIter` of `Item(key, value)` pairs.
    - Any other sized `Collection` (`set`, `frozenset`, dict views, ...) gives an `ExactSizeIter`.
    - Any other `Iterable` gives an `Iter` replaying `iter(data)` on each traversal.
    - A zero-argument callable returning an `Iterator` is used as the producer of an `Iter`.

    Note:
        Lengths are read once, at construction.

        A one-shot `Iterator` (e.g. a generator object) can only be traversed once: wrap its generator function instead.

    Args:
        data (Any): The value to wrap.

    Returns:
        Iter[Any]: The richest iterator tier for **data**.

    Raises:
        TypeError: If **data** is neither iterable nor callable.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.into_iter([1, 2, 3]).rev()
    DoubleEndedIter(3, 2, 1)
    >>> ps.into_iter({"a": 1}).collect()
    (('a', 1),)
    >>> ps.into_iter(x.upper() for x in "ab").collect()
    ('A', 'B')
    >>> def naturals():
    ...     n = 0
    ...     while True:
    ...         yield n
    ...         n += 1
    >>> ps.into_iter(naturals).skip(2).take(3).collect()
    (2, 3, 4)

    ```
    """
    match data:
        case Iter():
            return data
        case Sequence():
            return DoubleEndedIter(_gen.gen(data), _reversed(data), len(data))
        case Mapping():
            return ExactSizeIter(_items(data), len(data))
        case Collection():
            return ExactSizeIter(_gen.gen(data), len(data))
        case Iterable():
            return Iter(_gen.gen(data))
        case _ if callable(data):
            return Iter(data)
        case _:
            msg = f"Cannot build an iterator from {type(data).__name__!r}"
            raise TypeError(msg)
