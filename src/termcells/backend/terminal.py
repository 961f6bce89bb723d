"""ANSI terminal backend owning the live screen surface.

The backend keeps one row-major list of cells mirroring the screen. Grids
bound with ``CellGrid.bind(backend)`` draw straight into that list, and
``flush`` writes it to the terminal. The surface only exists inside
``session()``; it is reallocated whenever the terminal size changes.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

from termcells.core.cell import Cell
from termcells.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class TerminalBackend:
    """Terminal I/O plus the screen surface grids can bind to.

    Args:
        stream: Where escape sequences go (default ``sys.stdout``)
        size: Fixed size to use instead of querying the terminal
    """

    def __init__(self, stream: TextIO | None = None, size: TerminalSize | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._fixed_size = size
        self._renderer = TerminalRenderer(reset_at_end=False, trim_trailing=False)
        self._cells: list[Cell] = []
        self._width = 0
        self._height = 0
        self._active = False

    def __repr__(self) -> str:
        return f"TerminalBackend({self._width}x{self._height}, active={self._active})"

    def query_size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        if self._fixed_size is not None:
            return self._fixed_size
        try:
            size = os.get_terminal_size(self._stream.fileno())
            return TerminalSize(size.lines, size.columns)
        except (OSError, ValueError, AttributeError):
            return TerminalSize(24, 80)

    # Surface (see termcells.core.storage.SurfaceProvider)

    @property
    def active(self) -> bool:
        return self._active

    def surface_size(self) -> tuple[int, int]:
        return self._width, self._height

    def surface_cells(self) -> list[Cell]:
        return self._cells

    def resize_surface(self, width: int, height: int) -> None:
        """Reallocate the surface. Old cells are dropped, not migrated."""
        self._width = max(width, 0)
        self._height = max(height, 0)
        self._cells = [Cell()] * (self._width * self._height)
        logger.debug("Surface resized to %dx%d", self._width, self._height)

    def sync_size(self) -> bool:
        """Match the surface to the terminal. Returns True if it was resized."""
        size = self.query_size()
        if (size.cols, size.rows) == (self._width, self._height):
            return False
        self.resize_surface(size.cols, size.rows)
        return True

    # Output

    def write(self, text: str) -> None:
        """Write text to terminal."""
        self._stream.write(text)
        self._stream.flush()

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write('\x1b[2J\x1b[H')

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write('\x1b[0m')

    def hide_cursor(self) -> None:
        self.write('\x1b[?25l')

    def show_cursor(self) -> None:
        self.write('\x1b[?25h')

    def move_to(self, row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        self.write(f'\x1b[{row};{col}H')

    def flush(self) -> None:
        """Write the whole surface to the terminal, row by row."""
        for y in range(self._height):
            off = y * self._width
            self.move_to(y + 1, 1)
            self.write(self._renderer.render_row(self._cells[off:off + self._width]))
        self.reset()

    @contextmanager
    def session(self, alternate_screen: bool = True) -> Iterator[TerminalBackend]:
        """Open the screen: allocate the surface, clear, hide the cursor.

        Bindings to the surface become invalid once the session exits.
        """
        if self._active:
            raise RuntimeError("terminal session already active")
        self.sync_size()
        self._active = True
        logger.debug("Terminal session opened (%dx%d)", self._width, self._height)
        if alternate_screen:
            self.write('\x1b[?1049h')
        self.clear()
        self.hide_cursor()
        try:
            yield self
        finally:
            self.show_cursor()
            self.reset()
            if alternate_screen:
                self.write('\x1b[?1049l')
            self._active = False
            self._cells = []
            self._width = self._height = 0
            logger.debug("Terminal session closed")
