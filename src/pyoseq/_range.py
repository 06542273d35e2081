"""Arithmetic sequences of integers, traversable from either end.

`range()` excludes its end, `irange()` includes it when the step reaches it exactly.

Both build a `DoubleEndedIter[int]` whose reverse producer walks from the actual last value back to the start, and whose length is the exact number of values.
"""

from __future__ import annotations

import builtins
from collections.abc import Iterator
from typing import overload

from ._iter import DoubleEndedIter
from ._types import Producer

__all__ = ["irange", "range", "range_gen", "range_params"]


def range_params(arg1: int, arg2: int | None = None) -> tuple[int, int]:
    """Normalize the call shape of a range into `(start, end)`.

    A single argument is the end, starting from 0.

    Example:
    ```python
    >>> from pyoseq._range import range_params
    >>> range_params(5)
    (0, 5)
    >>> range_params(2, 10)
    (2, 10)

    ```
    """
    return (0, arg1) if arg2 is None else (arg1, arg2)


def _check_step(step: int) -> None:
    if step == 0:
        msg = "`step` must not be zero"
        raise ValueError(msg)


def _is_unreachable(start: int, end: int, step: int) -> bool:
    return (step > 0 and start > end) or (step < 0 and start < end)


def range_gen(start: int, end: int, step: int = 1) -> Producer[int]:
    """A producer walking from **start** towards **end** (excluded) by **step**.

    Args:
        start (int): The first value.
        end (int): The bound, never yielded.
        step (int): The difference between consecutive values. Defaults to 1.

    Returns:
        Producer[int]: The arithmetic walk, empty if **step** points away from **end**.

    Raises:
        ValueError: If **step** is zero, as soon as the producer is built.

    Example:
    ```python
    >>> from pyoseq._range import range_gen
    >>> list(range_gen(0, 5)())
    [0, 1, 2, 3, 4]
    >>> list(range_gen(2, 10, 2)())
    [2, 4, 6, 8]
    >>> list(range_gen(5, 0, -2)())
    [5, 3, 1]

    ```
    """
    _check_step(step)

    def _range_gen() -> Iterator[int]:
        return iter(builtins.range(start, end, step))

    return _range_gen


def _empty() -> DoubleEndedIter[int]:
    return DoubleEndedIter(range_gen(0, 0), range_gen(0, 0), 0)


@overload
def range(end: int, /) -> DoubleEndedIter[int]: ...  # noqa: A001
@overload
def range(start: int, end: int, step: int = 1, /) -> DoubleEndedIter[int]: ...  # noqa: A001
def range(  # noqa: A001
    arg1: int, arg2: int | None = None, step: int = 1, /
) -> DoubleEndedIter[int]:
    """Create the integers from **start** up to, but excluding, **end**, by **step**.

    - `range(end)` starts from 0.
    - `range(start, end)` uses a step of 1.
    - `range(start, end, step)` accepts any non-zero step, including negative ones.

    When **step** cannot reach **end** from **start**, the range is empty.

    Args:
        arg1 (int): **end** if it is the only argument, **start** otherwise.
        arg2 (int | None): **end**, when **start** is given.
        step (int): The difference between consecutive values. Defaults to 1.

    Returns:
        DoubleEndedIter[int]: The range, with its exact length.

    Raises:
        ValueError: If **step** is zero.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.range(5)
    DoubleEndedIter(0, 1, 2, 3, 4)
    >>> ps.range(2, 10, 2).rev()
    DoubleEndedIter(8, 6, 4, 2)
    >>> ps.range(10, 0, -2)
    DoubleEndedIter(10, 8, 6, 4, 2)
    >>> ps.range(0, 10, 3).length()
    4
    >>> ps.range(5, 2).length()
    0
    >>> ps.range(1, 5, 0)
    Traceback (most recent call last):
        ...
    ValueError: `step` must not be zero

    ```
    """
    start, end = range_params(arg1, arg2)
    _check_step(step)
    if _is_unreachable(start, end, step) or start == end:
        return _empty()
    # Python's modulo takes the sign of `step`, so this lands on the walk
    last = end - ((end - start) % step or step)
    return DoubleEndedIter(
        range_gen(start, end, step),
        range_gen(last, start - step, -step),
        -(-abs(end - start) // abs(step)),
    )


@overload
def irange(end: int, /) -> DoubleEndedIter[int]: ...
@overload
def irange(start: int, end: int, step: int = 1, /) -> DoubleEndedIter[int]: ...
def irange(arg1: int, arg2: int | None = None, step: int = 1, /) -> DoubleEndedIter[int]:
    """Create the integers from **start** up to, and including, **end**, by **step**.

    **end** is only included when it is reachable from **start** by a whole number of steps.

    Otherwise, the last value is the closest one before **end**.

    Takes the same call shapes as `range()`.

    Args:
        arg1 (int): **end** if it is the only argument, **start** otherwise.
        arg2 (int | None): **end**, when **start** is given.
        step (int): The difference between consecutive values. Defaults to 1.

    Returns:
        DoubleEndedIter[int]: The range, with its exact length.

    Raises:
        ValueError: If **step** is zero.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.irange(3)
    DoubleEndedIter(0, 1, 2, 3)
    >>> ps.irange(10, 0, -2)
    DoubleEndedIter(10, 8, 6, 4, 2, 0)
    >>> ps.irange(1, 10, 2).rev()
    DoubleEndedIter(9, 7, 5, 3, 1)
    >>> ps.irange(4, 4).length()
    1

    ```
    """
    start, end = range_params(arg1, arg2)
    _check_step(step)
    if _is_unreachable(start, end, step):
        return _empty()
    # the quotient is non-negative here, whatever the sign of `step`
    last = start + step * ((end - start) // step)
    return DoubleEndedIter(
        range_gen(start, last + step, step),
        range_gen(last, start - step, -step),
        abs(end - start) // abs(step) + 1,
    )
