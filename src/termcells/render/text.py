"""Plain-text view of a CellGrid, for logs, tests and snapshots."""

from __future__ import annotations

from termcells.core.grid import CellGrid
from termcells.core.rect import Rect


class TextRenderer:
    """Render grid characters without any styling.

    Args:
        preserve_whitespace: Keep trailing blanks and blank trailing rows
    """

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, grid: CellGrid, rect: Rect | None = None) -> str:
        """Render the grid, or only the part of ``rect`` inside it.

        A rect that misses the grid renders as an empty string.
        """
        area = grid.bounds() if rect is None else rect.intersection(grid.bounds())
        lines = [grid.row_text(y)[area.x:area.right] for y in range(area.y, area.bottom)]
        if self.preserve_whitespace:
            return '\n'.join(lines)
        return '\n'.join(line.rstrip() for line in lines).rstrip('\n')

    def render_label(self, grid: CellGrid, dest: Rect) -> str:
        """Text of the single row a label drawn into ``dest`` occupies."""
        return self.render(grid, dest.with_height(1))
