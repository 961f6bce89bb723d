"""Render a CellGrid to terminal-compatible escape sequences."""

from __future__ import annotations

from typing import Any

from termcells.core.cell import Cell
from termcells.core.color import Color
from termcells.core.grid import CellGrid


def _sgr(attr: Any, background: bool) -> str:
    """SGR parameters for one cell attribute.

    ``Color`` values are encoded for their mode; plain ints are taken as
    raw SGR codes.
    """
    if isinstance(attr, Color):
        return attr.to_sgr_bg() if background else attr.to_sgr_fg()
    if isinstance(attr, int):
        return str(attr)
    raise TypeError(f"Unsupported color attribute: {attr!r}")


class TerminalRenderer:
    """
    Render a CellGrid to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when attributes change.
    """

    def __init__(self, reset_at_end: bool = True, trim_trailing: bool = True):
        self.reset_at_end = reset_at_end
        self.trim_trailing = trim_trailing

    def render_row(self, row: list[Cell]) -> str:
        """Render one row, starting and ending in the default colors."""
        parts: list[str] = []
        last_fg: Any = Color.DEFAULT
        last_bg: Any = Color.DEFAULT

        # Find last non-blank cell to avoid trailing spaces
        last_col = len(row) - 1
        if self.trim_trailing:
            last_col = -1
            for x, cell in enumerate(row):
                if not cell.is_default():
                    last_col = x

        for cell in row[:last_col + 1]:
            sgr_parts: list[str] = []

            if cell.fg != last_fg:
                sgr_parts.append(_sgr(cell.fg, background=False))
                last_fg = cell.fg

            if cell.bg != last_bg:
                sgr_parts.append(_sgr(cell.bg, background=True))
                last_bg = cell.bg

            if sgr_parts:
                parts.append(f"\x1b[{';'.join(sgr_parts)}m")

            parts.append(cell.char)

        # Reset at end of each line to prevent color bleeding into clear-to-EOL
        if last_fg != Color.DEFAULT or last_bg != Color.DEFAULT:
            parts.append('\x1b[0m')

        return ''.join(parts)

    def render(self, grid: CellGrid) -> str:
        """Render grid to ANSI string, one line per row."""
        result = '\n'.join(self.render_row(row) for row in grid.rows())

        if self.reset_at_end:
            result += '\x1b[0m'

        return result
