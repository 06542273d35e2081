from __future__ import annotations

from .._types import Producer
from ._main import Iter


class ExactSizeIter[T](Iter[T]):
    """An `Iter` declaring how many elements it yields.

    The declared length is maintained by count-affecting transformations:

    - `take(n)` gives `min(n, length)`
    - `skip(n)` gives `max(0, length - n)`

    Every other transformation keeps it unchanged.

    After `filter()`, `take_while()` or `skip_while()` it is only an upper bound of the actual count, and after `cycle()` it is the length of one period.

    Use `count()` when the actual number of elements is needed.

    Args:
        gen (Producer[T]): The producer to wrap.
        length (int): The declared number of elements.

    Raises:
        ValueError: If **length** is negative.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> it = ps.into_iter({"a", "b", "c"})
    >>> it.length()
    3
    >>> len(it.skip(1))
    2

    ```
    """

    __slots__ = ()

    def __init__(self, gen: Producer[T], length: int) -> None:
        if length < 0:
            msg = f"{self.__class__.__name__} length must be non-negative, got {length}"
            raise ValueError(msg)
        super().__init__(gen)
        self._len = length
        self._exact = True

    def __len__(self) -> int:
        return self.length()

    def length(self) -> int:
        """Return the declared length, without traversing the sequence."""
        return self._len  # type: ignore[return-value]
