import pytest

from askit.drawstate import DrawState, is_empty_rect


def test_is_empty_rect():
    assert is_empty_rect((0, 0, 0, 0)) is True
    assert is_empty_rect((0, 0, 1, 0)) is False


def test_fresh_state_defaults():
    state = DrawState()
    assert state.take_rect() == (0, 0, 0, 0)
    assert state.take_number() == 0
    assert state.take_alpha() == 255


def test_rect_taken_once():
    state = DrawState()
    assert state.set_rect((1, 2, 3, 4)) == (1, 2, 3, 4)
    assert state.take_rect() == (1, 2, 3, 4)
    assert is_empty_rect(state.take_rect())


def test_rect_needs_four_values():
    with pytest.raises(ValueError):
        DrawState().set_rect((1, 2, 3))


def test_number_taken_once():
    state = DrawState()
    assert state.set_number(7) == 7
    assert state.take_number() == 7
    assert state.take_number() == 0


def test_alpha_taken_once_and_checked():
    state = DrawState()
    assert state.set_alpha(100) == 100
    assert state.take_alpha() == 100
    assert state.take_alpha() == 255
    with pytest.raises(ValueError):
        state.set_alpha(256)