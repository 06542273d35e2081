"""Tests for the process-wide configuration."""

from collections.abc import Iterator

import pytest

import pyoseq as ps


@pytest.fixture
def restore_config() -> Iterator[ps.Config]:
    previous = ps.get_config()
    yield previous
    ps.set_config(repr_items=previous.repr_items)


def test_default_config() -> None:
    """Test the default preview size."""
    assert ps.get_config().repr_items == 10


def test_set_config_changes_repr(restore_config: ps.Config) -> None:
    """Test that the preview size drives the repr of iterators."""
    updated = ps.set_config(repr_items=2)
    assert updated is ps.get_config()
    assert updated is not restore_config
    assert repr(ps.range(5)) == "DoubleEndedIter(0, 1, ...)"
    assert repr(ps.range(2)) == "DoubleEndedIter(0, 1)"


@pytest.mark.usefixtures("restore_config")
def test_invalid_config_is_rejected() -> None:
    """Test that invalid settings leave the current config untouched."""
    before = ps.get_config()
    with pytest.raises(ValueError, match="strictly positive"):
        ps.set_config(repr_items=0)
    with pytest.raises(TypeError):
        ps.set_config(unknown=1)
    assert ps.get_config() is before
