"""Cell - one terminal character position."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from termcells.core.color import Color


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with foreground and background attributes.

    Cells are values: the grid stores them by position and never mutates
    one in place, so a single prototype can be written to many positions.
    The attributes are opaque to the grid; only a renderer interprets them.
    """
    char: str = ' '
    fg: Any = Color.DEFAULT
    bg: Any = Color.DEFAULT

    def with_char(self, char: str) -> Cell:
        """Return a copy of this cell showing a different character."""
        return replace(self, char=char)

    def is_default(self) -> bool:
        """Check if this cell is blank with default attributes."""
        return self.char == ' ' and self.fg == Color.DEFAULT and self.bg == Color.DEFAULT
