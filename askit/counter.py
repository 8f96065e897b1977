"""Press counter tracking press and release edges of an input."""

from __future__ import annotations

INT32_MAX = 2**31 - 1


class Counter:
    """Counts how many consecutive updates an input has been held."""

    def __init__(self) -> None:
        self._down = False
        self._up = False
        self._count = 0

    def update(self, pressed: bool | int) -> None:
        """Record one frame of input; any non-zero value counts as pressed."""
        if pressed:
            self._down = self._count == 0
            if self._count < INT32_MAX:
                self._count += 1
        else:
            self._up = self._count != 0
            self._count = 0

    def down(self) -> bool:
        """True on the update where the input was first pressed."""
        return self._down

    def up(self) -> bool:
        """True on the update where the input was released."""
        return self._up

    def count(self) -> int:
        """Number of consecutive pressed updates."""
        return self._count

    def take_down(self) -> bool:
        """Return the press edge and clear it."""
        value, self._down = self._down, False
        return value

    def take_up(self) -> bool:
        """Return the release edge and clear it."""
        value, self._up = self._up, False
        return value

    def take_count(self) -> int:
        """Return the press count and reset it to zero."""
        value, self._count = self._count, 0
        return value