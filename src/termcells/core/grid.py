"""CellGrid - 2D grid of cells that labels and fills are drawn into."""

from __future__ import annotations

import logging
from typing import Iterator

from termcells.core.cell import Cell
from termcells.core.label import LabelParams, draw_label
from termcells.core.rect import Rect
from termcells.core.storage import CellStorage, OwnedStorage, SurfaceProvider, SurfaceStorage

logger = logging.getLogger(__name__)


class CellGrid:
    """
    A row-major grid of Cells addressed by (x, y).

    The grid either owns its cells or is bound to a backend's live screen
    surface (see ``bind``). Width and height always come from the storage,
    so a bound grid follows backend-driven resizes without caching.

    Every drawing operation clips its rect against ``bounds()`` first;
    nothing public can write outside the grid.
    """

    def __init__(self, width: int = 0, height: int = 0, *, storage: CellStorage | None = None) -> None:
        self._storage: CellStorage = storage if storage is not None else OwnedStorage(width, height)

    @classmethod
    def bind(cls, backend: SurfaceProvider) -> CellGrid:
        """Create a grid drawing straight into a backend's screen surface.

        The backend keeps ownership of the cells. The grid is valid while
        the backend session is active; afterwards any access raises
        ``SurfaceUnavailableError``.
        """
        logger.debug("Binding grid to backend surface %r", backend)
        return cls(storage=SurfaceStorage(backend))

    @property
    def storage(self) -> CellStorage:
        return self._storage

    @property
    def width(self) -> int:
        return self._storage.width

    @property
    def height(self) -> int:
        return self._storage.height

    def bounds(self) -> Rect:
        """Rect covering the whole grid."""
        return Rect.bounds(self)

    def resize(self, width: int, height: int) -> None:
        """Resize the grid. Cell contents are undefined after the resize."""
        self._storage.resize(width, height)

    def fill(self, dest: Rect, proto: Cell) -> None:
        """Fill the part of ``dest`` that lies inside the grid with ``proto``."""
        self._unsafe_fill(dest.intersection(self.bounds()), proto)

    def _unsafe_fill(self, dest: Rect, proto: Cell) -> None:
        # Doesn't check bounds; dest must already be clipped to the grid.
        if dest.is_empty:
            return
        cells = self._storage
        grid_width = self.width
        stride = grid_width - dest.width
        off = dest.y * grid_width + dest.x
        for _ in range(dest.height):
            for _ in range(dest.width):
                cells[off] = proto
                off += 1
            off += stride

    def draw_label(self, dest: Rect, params: LabelParams, text: str | bytes) -> None:
        """Draw a single-line label into ``dest``. See ``termcells.core.label``."""
        draw_label(self, dest, params, text)

    def _index(self, x: int, y: int) -> int:
        width = self.width
        if not (0 <= x < width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) out of bounds ({width}x{self.height})")
        return y * width + x

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        return self._storage[self._index(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        self._storage[self._index(x, y)] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: grid[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def row(self, y: int) -> list[Cell]:
        """Return a copy of row ``y``."""
        width = self.width
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} out of bounds (height={self.height})")
        cells = self._storage
        off = y * width
        return [cells[off + x] for x in range(width)]

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        for y in range(self.height):
            yield self.row(y)

    def row_text(self, y: int) -> str:
        """Characters of row ``y`` joined into a string."""
        return ''.join(cell.char for cell in self.row(y))
