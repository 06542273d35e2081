"""Combinators over restartable generators.

Every transformation takes its parameters first and a `Producer` last, and returns a new `Producer`.

Nothing is consumed until the returned `Producer` is called, and each call starts a brand-new traversal of the source.

Terminal operations (`fold`, `reduce`, `count`, `any`, `all`, `find`, `for_each`) traverse the source immediately and return a value.

Example:
```python
>>> from pyoseq import _gen
>>> evens = _gen.filter(lambda x: x % 2 == 0, _gen.gen(range(10)))
>>> squares = _gen.map(lambda x: x * x, evens)
>>> list(squares())
[0, 4, 16, 36, 64]
>>> list(squares())
[0, 4, 16, 36, 64]
>>> _gen.fold(0, lambda acc, x: acc + x, squares)
120

```
"""

from __future__ import annotations

import builtins
import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any

import cytoolz as cz
import more_itertools as mit

from ._results import NONE, Option, Some
from ._types import Enumerated, Predicate, Producer

__all__ = [
    "all",
    "any",
    "count",
    "cycle",
    "enumerate",
    "every",
    "filter",
    "find",
    "first",
    "fold",
    "for_each",
    "gen",
    "map",
    "reduce",
    "repeat",
    "reverse",
    "skip",
    "skip_while",
    "some",
    "take",
    "take_while",
]

_MISSING: Any = object()


def _check_count(n: int, name: str) -> None:
    if n < 0:
        msg = f"`{name}` expects a non-negative count, got {n}"
        raise ValueError(msg)


# sources


def gen[T](data: Iterable[T]) -> Producer[T]:
    """Lift an `Iterable` into a `Producer` replaying its traversal on each call.

    Note:
        A one-shot `Iterator` (e.g. a generator object) can only be replayed once.

    Args:
        data (Iterable[T]): The iterable to replay.

    Returns:
        Producer[T]: A producer calling `iter()` on **data** each time.
    """

    def _gen() -> Iterator[T]:
        return iter(data)

    return _gen


def repeat[T](item: T) -> Producer[T]:
    """An infinite producer yielding **item** forever.

    Example:
    ```python
    >>> from pyoseq import _gen
    >>> list(_gen.take(3, _gen.repeat("a"))())
    ['a', 'a', 'a']

    ```
    """

    def _repeat() -> Iterator[T]:
        return itertools.repeat(item)

    return _repeat


# transformations


def map[T, R](func: Callable[[T], R], gen: Producer[T]) -> Producer[R]:  # noqa: A001
    def _map() -> Iterator[R]:
        return builtins.map(func, gen())

    return _map


def filter[T](func: Predicate[T], gen: Producer[T]) -> Producer[T]:  # noqa: A001
    def _filter() -> Iterator[T]:
        return builtins.filter(func, gen())

    return _filter


def take[T](n: int, gen: Producer[T]) -> Producer[T]:
    """Yield at most the first **n** elements of **gen**.

    Raises:
        ValueError: If **n** is negative.
    """
    _check_count(n, "take")

    def _take() -> Iterator[T]:
        return cz.itertoolz.take(n, gen())

    return _take


def take_while[T](func: Predicate[T], gen: Producer[T]) -> Producer[T]:
    """Yield elements until **func** first returns `False`, then stop for good."""

    def _take_while() -> Iterator[T]:
        return itertools.takewhile(func, gen())

    return _take_while


def skip[T](n: int, gen: Producer[T]) -> Producer[T]:
    """Drop the first **n** elements of **gen**, yielding nothing if it is shorter.

    Raises:
        ValueError: If **n** is negative.
    """
    _check_count(n, "skip")

    def _skip() -> Iterator[T]:
        return cz.itertoolz.drop(n, gen())

    return _skip


def skip_while[T](func: Predicate[T], gen: Producer[T]) -> Producer[T]:
    """Drop the leading run of elements satisfying **func**, then yield everything else.

    Example:
    ```python
    >>> from pyoseq import _gen
    >>> list(_gen.skip_while(lambda x: x < 3, _gen.gen([1, 2, 3, 1, 4]))())
    [3, 1, 4]

    ```
    """

    def _skip_while() -> Iterator[T]:
        return itertools.dropwhile(func, gen())

    return _skip_while


def enumerate[T](  # noqa: A001
    gen: Producer[T], start: int = 0, step: int = 1
) -> Producer[Enumerated[T]]:
    """Pair each element with its index.

    Indices start at **start** and advance by **step**, which allows numbering a reverse traversal downwards.

    Example:
    ```python
    >>> from pyoseq import _gen
    >>> list(_gen.enumerate(_gen.gen("ab"))())
    [(0, 'a'), (1, 'b')]
    >>> list(_gen.enumerate(_gen.gen("ba"), start=1, step=-1)())
    [(1, 'b'), (0, 'a')]

    ```
    """

    def _enumerate() -> Iterator[Enumerated[T]]:
        return itertools.starmap(Enumerated, zip(itertools.count(start, step), gen()))

    return _enumerate


def cycle[T](gen: Producer[T]) -> Producer[T]:
    """Restart **gen** each time it is exhausted, forever.

    **Warning** ⚠️
        An empty source never yields and never terminates.
        Always bound the result with `take()` or `take_while()` before draining it.
    """

    def _cycle() -> Iterator[T]:
        while True:
            yield from gen()

    return _cycle


def reverse[T](gen: Producer[T]) -> Producer[T]:
    """Replay the traversal of **gen** backwards.

    Note:
        Each call materializes the whole forward traversal first.
    """

    def _reverse() -> Iterator[T]:
        return reversed(tuple(gen()))

    return _reverse


# terminal operations


def fold[T, U](init: U, func: Callable[[U, T], U], gen: Producer[T]) -> U:
    return functools.reduce(func, gen(), init)


def first[T](gen: Producer[T]) -> Option[T]:
    value = next(gen(), _MISSING)
    return NONE if value is _MISSING else Some(value)


def reduce[T](func: Callable[[T, T], T], gen: Producer[T]) -> Option[T]:
    """Accumulate from left to right, seeded by the first element.

    Returns `NONE` for an empty source.

    Example:
    ```python
    >>> from pyoseq import _gen
    >>> _gen.reduce(lambda a, b: a * b, _gen.gen([1, 2, 3, 4]))
    Some(value=24)
    >>> _gen.reduce(lambda a, b: a * b, _gen.gen([]))
    NONE

    ```
    """
    data = gen()
    seed = next(data, _MISSING)
    if seed is _MISSING:
        return NONE
    return Some(functools.reduce(func, data, seed))


def count[T](gen: Producer[T]) -> int:
    return fold(0, lambda acc, _: acc + 1, gen)


def any[T](func: Predicate[T], gen: Producer[T]) -> bool:  # noqa: A001
    return builtins.any(builtins.map(func, gen()))


def all[T](func: Predicate[T], gen: Producer[T]) -> bool:  # noqa: A001
    return builtins.all(builtins.map(func, gen()))


some = any
every = all


def find[T](func: Predicate[T], gen: Producer[T]) -> Option[T]:
    return first(filter(func, gen))


def for_each[T](func: Callable[[T], object], gen: Producer[T]) -> None:
    mit.consume(builtins.map(func, gen()))
