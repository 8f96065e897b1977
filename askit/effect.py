"""Fade-in and fade-out levels for screen effects."""

from __future__ import annotations

from dataclasses import dataclass


def _level(value: int | float) -> float:
    if isinstance(value, int) and not isinstance(value, bool):
        return value / 255.0
    return float(value)


@dataclass
class Effect:
    """Holds fade levels; integers are read on a 0-255 scale, floats as-is."""

    fade_in: float = 0.0
    fade_out: float = 0.0

    def set_in(self, value: int | float) -> Effect:
        """Set the fade-in level."""
        self.fade_in = _level(value)
        return self

    def set_out(self, value: int | float) -> Effect:
        """Set the fade-out level."""
        self.fade_out = _level(value)
        return self

    def in_byte(self) -> int:
        """Fade-in level on a 0-255 scale, truncated."""
        return int(self.fade_in * 255.0)

    def out_byte(self) -> int:
        """Fade-out level on a 0-255 scale, truncated."""
        return int(self.fade_out * 255.0)