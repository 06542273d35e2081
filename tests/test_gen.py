"""Tests for the producer-level combinators."""

from collections.abc import Iterator

import pytest

from pyoseq import NONE, Some, _gen


def _numbers() -> Iterator[int]:
    yield from (3, 1, 4, 1, 5, 9, 2, 6)


def test_gen_replays_iterable() -> None:
    """Test that the iterable adapter starts over on each call."""
    producer = _gen.gen([1, 2, 3])
    assert list(producer()) == [1, 2, 3]
    assert list(producer()) == [1, 2, 3]


def test_transformations_are_lazy() -> None:
    """Test that building a pipeline never calls the source."""
    calls: list[int] = []

    def _source() -> Iterator[int]:
        calls.append(1)
        yield from range(3)

    pipeline = _gen.map(str, _gen.filter(bool, _gen.skip(0, _source)))
    assert calls == []
    assert list(pipeline()) == ["1", "2"]
    assert calls == [1]


def test_take_and_skip() -> None:
    """Test truncation and offsets, including out of range counts."""
    assert list(_gen.take(3, _numbers)()) == [3, 1, 4]
    assert list(_gen.take(0, _numbers)()) == []
    assert list(_gen.take(50, _numbers)()) == list(_numbers())
    assert list(_gen.skip(6, _numbers)()) == [2, 6]
    assert list(_gen.skip(50, _numbers)()) == []


@pytest.mark.parametrize("combinator", [_gen.take, _gen.skip])
def test_negative_count_is_rejected(combinator) -> None:  # noqa: ANN001
    """Test that a negative count fails when the producer is built."""
    with pytest.raises(ValueError, match="non-negative"):
        combinator(-1, _numbers)


def test_take_while_stops_for_good() -> None:
    """Test that `take_while` does not resume after the first failure."""
    assert list(_gen.take_while(lambda x: x < 5, _numbers)()) == [3, 1, 4, 1]


def test_skip_while_only_drops_leading_run() -> None:
    """Test that `skip_while` yields everything after the first failure."""
    assert list(_gen.skip_while(lambda x: x < 4, _numbers)()) == [4, 1, 5, 9, 2, 6]


def test_enumerate() -> None:
    """Test zero-based positions, and custom numbering."""
    assert list(_gen.enumerate(_gen.gen("abc"))()) == [(0, "a"), (1, "b"), (2, "c")]
    pairs = list(_gen.enumerate(_gen.gen("cba"), start=2, step=-1)())
    assert pairs == [(2, "c"), (1, "b"), (0, "a")]
    assert pairs[0].idx == 2
    assert pairs[0].value == "c"


def test_cycle_restarts_the_producer() -> None:
    """Test that `cycle` repeats the source when bounded."""
    cycled = _gen.take(7, _gen.cycle(_gen.gen([1, 2, 3])))
    assert list(cycled()) == [1, 2, 3, 1, 2, 3, 1]


def test_repeat() -> None:
    """Test the infinite source constructor."""
    assert list(_gen.take(4, _gen.repeat(None))()) == [None] * 4


def test_reverse() -> None:
    """Test the materialized reverse traversal."""
    assert list(_gen.reverse(_numbers)()) == [6, 2, 9, 5, 1, 4, 1, 3]


def test_fold_and_count() -> None:
    """Test accumulation, and its empty case."""
    assert _gen.fold(0, lambda acc, x: acc + x, _numbers) == 31
    assert _gen.fold("init", lambda acc, x: acc + x, _gen.gen([])) == "init"
    assert _gen.count(_numbers) == 8
    assert _gen.count(_gen.gen(())) == 0


def test_reduce() -> None:
    """Test that `reduce` is seeded by the first element."""
    assert _gen.reduce(max, _numbers) == Some(9)
    assert _gen.reduce(lambda a, b: a - b, _gen.gen([10, 1, 2])) == Some(7)
    assert _gen.reduce(max, _gen.gen([])) is NONE


def test_reduce_distinguishes_none_elements() -> None:
    """Test that a `None` element is not mistaken for an empty source."""
    assert _gen.reduce(lambda a, _: a, _gen.gen([None])) == Some(None)


def test_any_all_short_circuit() -> None:
    """Test that boolean searches stop as soon as the answer is known."""
    assert _gen.any(lambda x: x > 3, _gen.repeat(5)) is True
    assert _gen.all(lambda x: x < 3, _gen.repeat(5)) is False
    assert _gen.any(bool, _gen.gen([])) is False
    assert _gen.all(bool, _gen.gen([])) is True
    assert _gen.some is _gen.any
    assert _gen.every is _gen.all


def test_find_and_first() -> None:
    """Test searches returning an `Option`."""
    assert _gen.find(lambda x: x > 4, _numbers) == Some(5)
    assert _gen.find(lambda x: x > 40, _numbers) is NONE
    assert _gen.first(_numbers) == Some(3)
    assert _gen.first(_gen.gen([])) is NONE


def test_for_each() -> None:
    """Test that `for_each` calls its function once per element."""
    seen: list[int] = []
    assert _gen.for_each(seen.append, _gen.take(3, _numbers)) is None
    assert seen == [3, 1, 4]
