from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, Self, overload

from .. import _gen
from .._core import Pipeable, get_config
from .._types import Enumerated, Predicate, Producer

if TYPE_CHECKING:
    from .._results import Option
    from ._double import DoubleEndedIter
    from ._sized import ExactSizeIter

type ReverseRule[T, U] = Callable[[Producer[T], Producer[U]], Producer[U]]
"""Derives the reverse producer of a result from the source reverse producer and the new forward producer."""


def _materialized[T, U](_rgen: Producer[T], forward: Producer[U]) -> Producer[U]:
    return _gen.reverse(forward)


def _skipping[T](n: int) -> ReverseRule[T, T]:
    def _rule(rgen: Producer[T], _forward: Producer[T]) -> Producer[T]:
        return _gen.skip(n, rgen)

    return _rule


def _taking[T](n: int) -> ReverseRule[T, T]:
    def _rule(rgen: Producer[T], _forward: Producer[T]) -> Producer[T]:
        return _gen.take(n, rgen)

    return _rule


def _counting_down[T](top: int) -> ReverseRule[T, Enumerated[T]]:
    def _rule(
        rgen: Producer[T], _forward: Producer[Enumerated[T]]
    ) -> Producer[Enumerated[T]]:
        return _gen.enumerate(rgen, start=top, step=-1)

    return _rule


def _build[T](
    gen: Producer[T], rgen: Producer[T] | None, length: int | None, *, exact: bool
) -> Iter[T]:
    """Pick the richest tier supported by the capabilities at hand.

    - no length: `Iter`
    - a length but no reverse producer: `ExactSizeIter`
    - both: `DoubleEndedIter`
    """
    from ._double import DoubleEndedIter
    from ._sized import ExactSizeIter

    out: Iter[T]
    if length is None:
        out = Iter(gen)
    elif rgen is None:
        out = ExactSizeIter(gen, length)
    else:
        out = DoubleEndedIter(gen, rgen, length)
    out._exact = exact
    return out


class Iter[T](Pipeable, Iterable[T]):
    """A lazy, restartable sequence built on top of a `Producer`.

    A `Producer` is a zero-argument callable returning a fresh `Iterator` each time it is called.

    Unlike a plain Python `Iterator`, an `Iter` is never exhausted: every traversal (a for-loop, `.collect()`, `.count()`, ...) calls the producer again.

    Every transformation returns a new `Iter` wrapping a newly combined producer, leaving the source untouched and reusable.

    Transformations keep the richest tier the source supports:

    - `Iter` only knows how to produce its values.
    - `ExactSizeIter` also declares a length.
    - `DoubleEndedIter` also carries a reverse producer, and can be traversed from either end.

    Args:
        gen (Producer[T]): The producer to wrap.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> it = ps.Iter(lambda: iter([1, 2, 3])).map(lambda x: x * 10)
    >>> it.collect()
    (10, 20, 30)
    >>> it.collect(list)
    [10, 20, 30]
    >>> it
    Iter(10, 20, 30)

    ```
    """

    _gen: Producer[T]
    _len: int | None
    _rgen: Producer[T] | None
    _exact: bool

    __slots__ = ("_exact", "_gen", "_len", "_rgen")

    def __init__(self, gen: Producer[T]) -> None:
        self._gen = gen
        self._len = None
        self._rgen = None
        self._exact = False

    def __iter__(self) -> Iterator[T]:
        return self._gen()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._gen())})"

    def _derive[U](
        self,
        op: Callable[[Producer[T]], Producer[U]],
        *,
        length: int | None,
        exact: bool,
        reverse: ReverseRule[T, U] | None = None,
    ) -> Any:
        forward = op(self._gen)
        match self._rgen:
            case None:
                rgen = None
            case _ if reverse is None:
                rgen = op(self._rgen)
            case _:
                rgen = reverse(self._rgen, forward)
        return _build(forward, rgen, length, exact=exact)

    @staticmethod
    def repeat[U](item: U) -> Iter[U]:
        """Create an infinite `Iter` yielding **item** forever.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.take_while()` to limit the number of items taken.

        Args:
            item (U): The value to repeat.

        Returns:
            Iter[U]: An iterator repeating **item**.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Iter.repeat("x").take(3).collect()
        ('x', 'x', 'x')

        ```
        """
        return Iter(_gen.repeat(item))

    def collect[C](self, collector: Callable[[Iterable[T]], C] = tuple) -> C:
        """Materialize a traversal into a collection.

        Args:
            collector (Callable[[Iterable[T]], C]): Function|type building the collection. Defaults to `tuple`.

        Returns:
            C: The collection holding every element.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(3).collect()
        (0, 1, 2)
        >>> ps.range(3).collect(set)
        {0, 1, 2}

        ```
        """
        return collector(self)

    # transformations

    @overload
    def map[R](self: DoubleEndedIter[T], func: Callable[[T], R]) -> DoubleEndedIter[R]: ...
    @overload
    def map[R](self: ExactSizeIter[T], func: Callable[[T], R]) -> ExactSizeIter[R]: ...
    @overload
    def map[R](self, func: Callable[[T], R]) -> Iter[R]: ...
    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply **func** to each element, in order.

        The number of elements, hence the declared length, is unchanged.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of the mapped elements, of the same tier.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(4).map(lambda x: x * 2).rev().collect()
        (6, 4, 2, 0)

        ```
        """
        return self._derive(partial(_gen.map, func), length=self._len, exact=self._exact)

    def filter(self, func: Predicate[T]) -> Self:
        """Keep the elements for which **func** returns `True`, in order.

        Note:
            The declared length of sized tiers is kept as is, and becomes an upper bound of the actual count.

        Args:
            func (Predicate[T]): Function to evaluate each element.

        Returns:
            Self: An iterator of the kept elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> evens = ps.range(10).filter(lambda x: x % 2 == 0)
        >>> evens.collect()
        (0, 2, 4, 6, 8)
        >>> evens.length()
        10
        >>> evens.count()
        5

        ```
        """
        return self._derive(partial(_gen.filter, func), length=self._len, exact=False)

    @overload
    def take(self: DoubleEndedIter[T], n: int) -> DoubleEndedIter[T]: ...
    @overload
    def take(self, n: int) -> ExactSizeIter[T]: ...
    def take(self, n: int) -> ExactSizeIter[T]:
        """Yield the first **n** elements, or fewer if the source ends sooner.

        Taking promotes a plain `Iter` to an `ExactSizeIter` whose length is **n**, an upper bound of the actual count.

        On sized tiers, the length becomes `min(n, length)`.

        Args:
            n (int): Number of elements to take.

        Returns:
            ExactSizeIter[T]: A sized iterator of the first **n** elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Iter.repeat(1).take(3)
        ExactSizeIter(1, 1, 1)
        >>> ps.range(10).take(3).rev().collect()
        (2, 1, 0)
        >>> ps.range(2).take(5).length()
        2

        ```
        """
        length = n if self._len is None else min(n, self._len)
        reverse: ReverseRule[T, T] = _materialized
        if self._exact and self._len is not None:
            # the reverse producer starts at the tail, past the untaken elements
            reverse = _skipping(self._len - length)
        return self._derive(
            partial(_gen.take, n), length=length, exact=self._exact, reverse=reverse
        )

    def take_while(self, func: Predicate[T]) -> Self:
        """Yield elements until **func** first returns `False`, then stop.

        Later elements are never yielded, even if they satisfy **func** again.

        Args:
            func (Predicate[T]): Function to evaluate each element.

        Returns:
            Self: An iterator of the leading run satisfying **func**.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.into_iter([1, 2, 0, 3]).take_while(lambda x: x > 0).collect()
        (1, 2)

        ```
        """
        return self._derive(
            partial(_gen.take_while, func),
            length=self._len,
            exact=False,
            reverse=_materialized,
        )

    def skip(self, n: int) -> Self:
        """Drop the first **n** elements, yielding nothing if the source is shorter.

        On sized tiers, the length becomes `max(0, length - n)`.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Self: An iterator of the remaining elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(5).skip(2)
        DoubleEndedIter(2, 3, 4)
        >>> ps.range(5).skip(9).length()
        0

        ```
        """
        length = None if self._len is None else max(0, self._len - n)
        reverse: ReverseRule[T, T] = _materialized
        if self._exact and length is not None:
            reverse = _taking(length)
        return self._derive(
            partial(_gen.skip, n), length=length, exact=self._exact, reverse=reverse
        )

    def skip_while(self, func: Predicate[T]) -> Self:
        """Drop the leading run of elements satisfying **func**, then yield everything else.

        Once **func** returns `False` for an element, it is no longer called.

        Args:
            func (Predicate[T]): Function to evaluate each element.

        Returns:
            Self: An iterator of the elements after the leading run.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.into_iter([1, 2, 0, 3]).skip_while(lambda x: x > 0).collect()
        (0, 3)

        ```
        """
        return self._derive(
            partial(_gen.skip_while, func),
            length=self._len,
            exact=False,
            reverse=_materialized,
        )

    @overload
    def enumerate(self: DoubleEndedIter[T]) -> DoubleEndedIter[Enumerated[T]]: ...
    @overload
    def enumerate(self: ExactSizeIter[T]) -> ExactSizeIter[Enumerated[T]]: ...
    @overload
    def enumerate(self) -> Iter[Enumerated[T]]: ...
    def enumerate(self) -> Iter[Enumerated[T]]:
        """Pair each element with its zero-based position.

        Positions are counted along the forward traversal: reversing afterwards keeps them, reversing first renumbers from 0.

        Returns:
            Iter[Enumerated[T]]: An iterator of `(idx, value)` pairs.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.into_iter("ab").enumerate().collect()
        ((0, 'a'), (1, 'b'))
        >>> ps.into_iter("ab").enumerate().rev().collect()
        ((1, 'b'), (0, 'a'))
        >>> ps.into_iter("ab").rev().enumerate().collect()
        ((0, 'b'), (1, 'a'))

        ```
        """
        reverse: ReverseRule[T, Enumerated[T]] = _materialized
        if self._exact and self._len is not None:
            reverse = _counting_down(self._len - 1)
        return self._derive(
            _gen.enumerate, length=self._len, exact=self._exact, reverse=reverse
        )

    def cycle(self) -> Self:
        """Repeat the sequence indefinitely.

        **Warning** ⚠️
            This creates an infinite iterator, and an empty source loops forever without yielding.
            Be sure to use `Iter.take()` or `Iter.take_while()` to limit the number of items taken.
            `repr()` also traverses the producer: showing a cycled empty iterator (in a REPL or a debugger) never returns.

        Note:
            Sized tiers keep the length of one period as their declared length.

        Returns:
            Self: An iterator cycling through the elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(3).cycle().take(7).collect()
        (0, 1, 2, 0, 1, 2, 0)
        >>> ps.range(3).cycle().length()
        3

        ```
        """
        return self._derive(_gen.cycle, length=self._len, exact=False)

    # terminal operations

    def fold[U](self, init: U, func: Callable[[U, T], U]) -> U:
        """Accumulate the elements from left to right, starting from **init**.

        Args:
            init (U): The initial accumulator, returned as is for an empty sequence.
            func (Callable[[U, T], U]): Function combining the accumulator with each element.

        Returns:
            U: The final accumulator.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.irange(1, 4).fold("", lambda acc, x: acc + str(x))
        '1234'
        >>> ps.range(0).fold(42, lambda acc, x: acc + x)
        42

        ```
        """
        return _gen.fold(init, func, self._gen)

    def reduce(self, func: Callable[[T, T], T]) -> Option[T]:
        """Accumulate the elements from left to right, starting from the first one.

        Args:
            func (Callable[[T, T], T]): Function combining the accumulator with each element.

        Returns:
            Option[T]: `Some(result)`, or `NONE` if the sequence is empty.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.irange(1, 4).reduce(lambda a, b: a * b)
        Some(value=24)
        >>> ps.range(0).reduce(lambda a, b: a * b)
        NONE

        ```
        """
        return _gen.reduce(func, self._gen)

    def count(self) -> int:
        """Count the elements by traversing the sequence.

        Unlike `length()`, this is always the actual number of elements.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(10).filter(lambda x: x > 6).count()
        3

        ```
        """
        return _gen.count(self._gen)

    def any(self, func: Predicate[T] = bool) -> bool:
        """Return `True` if at least one element satisfies **func**, stopping at the first match.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.Iter.repeat(5).any(lambda x: x == 5)
        True
        >>> ps.range(3).any(lambda x: x > 5)
        False

        ```
        """
        return _gen.any(func, self._gen)

    def all(self, func: Predicate[T] = bool) -> bool:
        """Return `True` if every element satisfies **func**, stopping at the first failure.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(1, 4).all(lambda x: x > 0)
        True
        >>> ps.range(0).all(lambda x: x > 0)
        True

        ```
        """
        return _gen.all(func, self._gen)

    def some(self, func: Predicate[T] = bool) -> bool:
        """Alias of `Iter.any()`."""
        return self.any(func)

    def every(self, func: Predicate[T] = bool) -> bool:
        """Alias of `Iter.all()`."""
        return self.all(func)

    def find(self, func: Predicate[T]) -> Option[T]:
        """Search for the first element satisfying **func**.

        Args:
            func (Predicate[T]): Function to evaluate each element.

        Returns:
            Option[T]: `Some(element)` if found, `NONE` otherwise.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(10).find(lambda x: x > 5)
        Some(value=6)
        >>> ps.range(10).find(lambda x: x > 9).unwrap_or("missing")
        'missing'
        >>> ps.into_iter([None]).find(lambda x: x is None)
        Some(value=None)

        ```
        """
        return _gen.find(func, self._gen)

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call **func** on each element, for its side effects.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(3).for_each(print)
        0
        1
        2

        ```
        """
        return _gen.for_each(func, self._gen)

    takeWhile = take_while  # noqa: N815
    skipWhile = skip_while  # noqa: N815
    forEach = for_each  # noqa: N815
