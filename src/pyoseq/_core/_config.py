from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from ._format import iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings of pyoseq.

    Args:
        repr_items (int): Number of elements previewed by the `__repr__` of iterators. Defaults to 10.

    Raises:
        ValueError: If **repr_items** is not strictly positive.
    """

    repr_items: int = 10

    def __post_init__(self) -> None:
        if self.repr_items <= 0:
            msg = f"`repr_items` must be strictly positive, got {self.repr_items}"
            raise ValueError(msg)

    def iter_repr(self, values: Iterable[object]) -> str:
        return iter_repr(values, self.repr_items)


_CONFIG = Config()


def get_config() -> Config:
    """Return the current `Config`."""
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace the current `Config` with a copy updated by **changes**.

    Args:
        **changes (int): Fields of `Config` to update.

    Returns:
        Config: The new current configuration.

    Raises:
        TypeError: If a key is not a field of `Config`.

    Example:
    ```python
    >>> import pyoseq as ps
    >>> previous = ps.get_config()
    >>> _ = ps.set_config(repr_items=3)
    >>> ps.range(10)
    DoubleEndedIter(0, 1, 2, ...)
    >>> _ = ps.set_config(repr_items=previous.repr_items)
    >>> ps.range(4)
    DoubleEndedIter(0, 1, 2, 3)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
