from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The result of a lookup that may find nothing.

    Terminal operations such as `Iter.find()`, `Iter.reduce()` or `DoubleEndedIter.last()` return `Some(value)` when they produce an element, and `NONE` otherwise.

    Unlike a bare `None`, `NONE` can never be confused with an element of the sequence.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> ps.into_iter([None, 1]).find(lambda x: x is None)
    Some(value=None)
    >>> ps.into_iter([1, 2]).find(lambda x: x is None)
    NONE

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Check whether an element was produced.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(3).last().is_some()
        True
        >>> ps.range(0).last().is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Check whether the operation came up empty."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Return the produced element.

        Raises:
            OptionUnwrapError: On `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.irange(1, 4).reduce(lambda acc, x: acc * x).unwrap()
        24
        >>> ps.range(0).reduce(max).unwrap()
        Traceback (most recent call last):
            ...
        pyoseq._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Return the produced element, failing with **msg** on `NONE`.

        Args:
            msg (str): Prefix of the error message.

        Raises:
            OptionUnwrapError: On `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(0, 20, 7).last().expect("empty walk")
        14
        >>> ps.range(5, 0).last().expect("empty walk")
        Traceback (most recent call last):
            ...
        pyoseq._results._option.OptionUnwrapError: empty walk (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Return the produced element, or **default** on `NONE`.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(10).find(lambda x: x > 7).unwrap_or(-1)
        8
        >>> ps.range(10).find(lambda x: x > 70).unwrap_or(-1)
        -1

        ```
        """
        return self.unwrap() if self.is_some() else default


@dataclass(slots=True)
class Some[T](Option[T]):
    """An element was produced."""

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Nothing was produced; use the `NONE` singleton."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
