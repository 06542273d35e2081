"""Tests for slot usage in pyoseq classes."""

import pyoseq as ps


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ps.Iter(lambda: iter(())))
    assert _check_slots(ps.Iter(lambda: iter(())).take(1))
    assert _check_slots(ps.range(3))
    assert _check_slots(ps.Some(42))
    assert _check_slots(ps.NoneOption())
    assert _check_slots(ps.get_config())
