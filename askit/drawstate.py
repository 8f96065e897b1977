"""One-shot drawing parameters: set before a draw, taken (and reset) by it."""

from __future__ import annotations

from typing import Sequence

EMPTY_RECT = (0, 0, 0, 0)
DEFAULT_NUMBER = 0
DEFAULT_ALPHA = 255


def is_empty_rect(rect: Sequence[int]) -> bool:
    """True if every coordinate of the rectangle is zero."""
    return all(value == 0 for value in rect[:4])


class DrawState:
    """Holds a pending rectangle, number and alpha until they are taken."""

    def __init__(self) -> None:
        self._rect: tuple[int, ...] = EMPTY_RECT
        self._number = DEFAULT_NUMBER
        self._alpha = DEFAULT_ALPHA

    def set_rect(self, rect: Sequence[int] = EMPTY_RECT) -> tuple[int, ...]:
        """Store a rectangle and return it."""
        if len(rect) != 4:
            raise ValueError(f"rectangle needs four values, got {len(rect)}")
        self._rect = tuple(rect)
        return self._rect

    def take_rect(self) -> tuple[int, ...]:
        """Return the stored rectangle and reset it to all zeros."""
        value, self._rect = self._rect, EMPTY_RECT
        return value

    def set_number(self, number: int = DEFAULT_NUMBER) -> int:
        """Store a drawing number and return it."""
        self._number = number
        return number

    def take_number(self) -> int:
        """Return the stored number and reset it to zero."""
        value, self._number = self._number, DEFAULT_NUMBER
        return value

    def set_alpha(self, alpha: int = DEFAULT_ALPHA) -> int:
        """Store an alpha in 0-255 and return it."""
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha out of range: {alpha}")
        self._alpha = alpha
        return alpha

    def take_alpha(self) -> int:
        """Return the stored alpha and reset it to opaque."""
        value, self._alpha = self._alpha, DEFAULT_ALPHA
        return value