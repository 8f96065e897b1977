"""Strings kept in several languages, looked up by language id."""

from __future__ import annotations

from enum import IntEnum


class LanguageId(IntEnum):
    """Languages known by default."""

    ENGLISH = 0
    JAPANESE = 1


class Phrase:
    """One piece of text with a translation per language slot."""

    def __init__(self, count: int = len(LanguageId)) -> None:
        if count < 0:
            raise ValueError(f"language count must not be negative: {count}")
        self._texts = [""] * count

    def __len__(self) -> int:
        return len(self._texts)

    def set(self, language: int, text: str) -> None:
        """Store ``text`` for ``language``; empty text or an unknown slot is ignored."""
        if not 0 <= language < len(self._texts) or not text:
            return
        self._texts[language] = text

    def get(self, language: int = LanguageId.ENGLISH) -> str:
        """Text stored for ``language``, empty if none was set."""
        if not 0 <= language < len(self._texts):
            raise IndexError(f"no language slot {int(language)}")
        return self._texts[language]