from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(5).into(sum)
        10
        >>> ps.range(3).into(lambda it, sep: sep.join(map(str, it)), "-")
        '0-1-2'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Since iterators are restartable, **func** may traverse the instance without exhausting it for the rest of the chain.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import pyoseq as ps
        >>> ps.range(4).inspect(lambda it: print(list(it))).count()
        [0, 1, 2, 3]
        4

        ```
        """
        func(self, *args, **kwargs)
        return self
