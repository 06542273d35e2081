from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, overload

from .. import _gen
from ._sized import ExactSizeIter

if TYPE_CHECKING:
    from .._results import Option
    from .._types import Producer


class DoubleEndedIter[T](ExactSizeIter[T]):
    """An `ExactSizeIter` which can also be traversed from its last element.

    It carries a reverse producer kept in lockstep with the forward one: draining it yields exactly the forward values, backwards.

    Every transformation derives both producers, so `rev()` only swaps them.

    Args:
        gen (Producer[T]): The forward producer.
        rgen (Producer[T]): The reverse producer.
        length (int): The declared number of elements.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> it = ps.range(1, 6).map(lambda x: x * x)
    >>> it.collect()
    (1, 4, 9, 16, 25)
    >>> it.rev().collect()
    (25, 16, 9, 4, 1)
    >>> list(reversed(it))
    [25, 16, 9, 4, 1]
    >>> it.last()
    Some(value=25)

    ```
    """

    __slots__ = ()

    def __init__(self, gen: Producer[T], rgen: Producer[T], length: int) -> None:
        super().__init__(gen, length)
        self._rgen = rgen

    def __reversed__(self) -> Iterator[T]:
        return self._rgen()  # type: ignore[misc]

    @overload
    @staticmethod
    def range(end: int, /) -> DoubleEndedIter[int]: ...
    @overload
    @staticmethod
    def range(start: int, end: int, step: int = 1, /) -> DoubleEndedIter[int]: ...
    @staticmethod
    def range(
        arg1: int, arg2: int | None = None, step: int = 1, /
    ) -> DoubleEndedIter[int]:
        """Same as `pyoseq.range()`."""
        from .._range import range as _range

        return _range(arg1, arg2, step)

    @overload
    @staticmethod
    def irange(end: int, /) -> DoubleEndedIter[int]: ...
    @overload
    @staticmethod
    def irange(start: int, end: int, step: int = 1, /) -> DoubleEndedIter[int]: ...
    @staticmethod
    def irange(
        arg1: int, arg2: int | None = None, step: int = 1, /
    ) -> DoubleEndedIter[int]:
        """Same as `pyoseq.irange()`."""
        from .._range import irange

        return irange(arg1, arg2, step)

    def rev(self) -> DoubleEndedIter[T]:
        """Swap the forward and reverse producers.

        Nothing is re-derived or traversed, so this is O(1).

        Returns:
            DoubleEndedIter[T]: The same elements, in reverse order.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(10, 0, -3).rev()
        DoubleEndedIter(1, 4, 7, 10)
        >>> ps.range(10, 0, -3).rev().rev()
        DoubleEndedIter(10, 7, 4, 1)

        ```
        """
        out = DoubleEndedIter(self._rgen, self._gen, self.length())  # type: ignore[arg-type]
        out._exact = self._exact
        return out

    def last(self) -> Option[T]:
        """Return the last element, pulled from the reverse producer.

        Returns:
            Option[T]: `Some(element)`, or `NONE` if the sequence is empty.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(0, 100, 7).last()
        Some(value=98)
        >>> ps.range(5, 2).last()
        NONE

        ```
        """
        return _gen.first(self._rgen)  # type: ignore[arg-type]
