"""Tests for the `ExactSizeIter` tier."""

import pytest

import pyoseq as ps


def _sized(n: int) -> ps.ExactSizeIter[int]:
    return ps.ExactSizeIter(lambda: iter(range(n)), n)


def test_length_and_len() -> None:
    """Test that the declared length is exposed without traversal."""
    it = _sized(4)
    assert it.length() == 4
    assert len(it) == 4
    assert list(it) == [0, 1, 2, 3]


def test_negative_length_is_rejected() -> None:
    """Test that a declared length cannot be negative."""
    with pytest.raises(ValueError, match="non-negative"):
        ps.ExactSizeIter(lambda: iter(()), -1)


def test_tier_is_kept() -> None:
    """Test that every transformation keeps the sized tier, without reverse."""
    it = _sized(5)
    for derived in (
        it.map(str),
        it.filter(bool),
        it.take(2),
        it.take_while(bool),
        it.skip(2),
        it.skip_while(bool),
        it.enumerate(),
        it.cycle(),
    ):
        assert type(derived) is ps.ExactSizeIter


@pytest.mark.parametrize("n", [0, 1, 3, 5, 8])
def test_take_length(n: int) -> None:
    """Test that `take` declares `min(n, length)`, matching the actual count."""
    taken = _sized(5).take(n)
    assert taken.length() == min(n, 5)
    assert taken.count() == min(n, 5)


@pytest.mark.parametrize("n", [0, 1, 3, 5, 8])
def test_skip_length(n: int) -> None:
    """Test that `skip` declares `max(0, length - n)`, matching the actual count."""
    skipped = _sized(5).skip(n)
    assert skipped.length() == max(0, 5 - n)
    assert skipped.count() == max(0, 5 - n)


def test_chained_take_and_skip() -> None:
    """Test length bookkeeping across several count-affecting steps."""
    it = _sized(10).skip(3).take(4).skip(1)
    assert it.collect() == (4, 5, 6)
    assert it.length() == 3


def test_filter_length_is_an_upper_bound() -> None:
    """Test that predicate-based steps keep the previous length as an upper bound."""
    odd = _sized(10).filter(lambda x: x % 2 == 1)
    assert odd.length() == 10
    assert odd.count() == 5
    assert odd.take(3).count() == 3
    assert odd.take(7).count() == 5
    assert _sized(10).take_while(lambda x: x < 2).length() == 10
    assert _sized(10).skip_while(lambda x: x < 2).length() == 10


def test_map_and_enumerate_keep_length() -> None:
    """Test that one-to-one transformations keep an exact length."""
    it = _sized(3).map(lambda x: x * 10).enumerate()
    assert it.length() == 3
    assert it.collect() == ((0, 0), (1, 10), (2, 20))


def test_cycle_keeps_period_length() -> None:
    """Test that `cycle` keeps the length of one period."""
    cycled = _sized(3).cycle()
    assert cycled.length() == 3
    assert cycled.take(7).collect() == (0, 1, 2, 0, 1, 2, 0)
