import pytest

from askit.effect import Effect


def test_defaults_are_zero():
    e = Effect()
    assert (e.in_byte(), e.out_byte()) == (0, 0)


def test_float_stored_directly():
    e = Effect().set_in(0.25).set_out(0.75)
    assert e.fade_in == 0.25
    assert e.fade_out == 0.75


def test_integer_scaled_by_255():
    e = Effect().set_in(255).set_out(0)
    assert e.fade_in == pytest.approx(1.0)
    assert e.in_byte() == 255
    assert e.out_byte() == 0


def test_byte_truncates():
    assert Effect().set_in(0.5).in_byte() == 127


@pytest.mark.parametrize("value", [0, 51, 102, 255])
def test_integer_round_trip(value):
    e = Effect().set_out(value)
    assert e.fade_out * 255.0 == pytest.approx(value)


def test_setters_chain():
    e = Effect()
    assert e.set_in(1.0) is e
    assert e.set_out(1.0) is e