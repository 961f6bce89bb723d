"""Bidirectional character cursor over label text."""

from __future__ import annotations


class CharCursor:
    """
    Walks a piece of text one character at a time from either end.

    The text is decoded once up front; ``bytes`` are taken as UTF-8 and
    malformed sequences become U+FFFD. Characters are Unicode code points,
    so truncation never splits a multi-byte character.

    The front and back ends consume independently and never cross: once
    they meet, both report exhaustion.
    """

    def __init__(self, text: str | bytes) -> None:
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8", errors="replace")
        self._text = text
        self._front = 0
        self._back = len(text)

    def __len__(self) -> int:
        """Number of characters not yet consumed from either end."""
        return self._back - self._front

    @property
    def text(self) -> str:
        return self._text

    def next(self) -> str | None:
        """Consume and return the next character from the front."""
        if self._front >= self._back:
            return None
        char = self._text[self._front]
        self._front += 1
        return char

    def prev(self) -> str | None:
        """Consume and return the next character from the back."""
        if self._back <= self._front:
            return None
        self._back -= 1
        return self._text[self._back]

    def skip(self, n: int) -> None:
        """Drop up to ``n`` characters from the front."""
        if n > 0:
            self._front = min(self._front + n, self._back)
