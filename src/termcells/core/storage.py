"""Cell storage backends for CellGrid.

A grid doesn't care where its cells live. ``OwnedStorage`` keeps them in a
list the grid owns outright. ``SurfaceStorage`` is a non-owning view over a
backend's live screen surface; it asks the backend for the current size and
cell list on every access because the backend may reallocate both between
calls. The view is only valid while the backend session is active.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from termcells.core.cell import Cell

logger = logging.getLogger(__name__)


class SurfaceUnavailableError(RuntimeError):
    """Raised when a surface binding is used after its backend session ended."""


@runtime_checkable
class CellStorage(Protocol):
    """Storage capability a CellGrid draws through."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> Cell:
        ...

    def __setitem__(self, index: int, cell: Cell) -> None:
        ...

    def resize(self, width: int, height: int) -> None:
        """Change the logical dimensions. Contents are undefined afterwards."""
        ...


@runtime_checkable
class SurfaceProvider(Protocol):
    """What a backend exposes so a grid can draw straight into its screen."""

    @property
    def active(self) -> bool:
        """Whether the backend session owning the surface is still open."""
        ...

    def surface_size(self) -> tuple[int, int]:
        """Current surface size as (width, height)."""
        ...

    def surface_cells(self) -> list[Cell]:
        """The live, row-major cell list backing the surface."""
        ...

    def resize_surface(self, width: int, height: int) -> None:
        ...


class OwnedStorage:
    """Row-major cell list owned by the grid.

    Shrinking keeps the allocation around as spare capacity so that growing
    back within it doesn't reallocate.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = max(width, 0)
        self._height = max(height, 0)
        self._length = self._width * self._height
        self._cells: list[Cell] = [Cell()] * self._length

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def capacity(self) -> int:
        """Number of allocated cells, at least ``len(self)``."""
        return len(self._cells)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> Cell:
        if not 0 <= index < self._length:
            raise IndexError(f"cell index {index} out of range (length={self._length})")
        return self._cells[index]

    def __setitem__(self, index: int, cell: Cell) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"cell index {index} out of range (length={self._length})")
        self._cells[index] = cell

    def resize(self, width: int, height: int) -> None:
        self._width = max(width, 0)
        self._height = max(height, 0)
        size = self._width * self._height
        if size > len(self._cells):
            logger.debug("Reallocating cell storage: %d -> %d cells", len(self._cells), size)
            self._cells = [Cell()] * size
        self._length = size


class SurfaceStorage:
    """Non-owning view over a backend's live surface."""

    def __init__(self, provider: SurfaceProvider) -> None:
        self._provider = provider

    def _check(self) -> None:
        if not self._provider.active:
            raise SurfaceUnavailableError("backend session has ended; surface binding is no longer valid")

    @property
    def width(self) -> int:
        self._check()
        return self._provider.surface_size()[0]

    @property
    def height(self) -> int:
        self._check()
        return self._provider.surface_size()[1]

    def __len__(self) -> int:
        self._check()
        width, height = self._provider.surface_size()
        return width * height

    def __getitem__(self, index: int) -> Cell:
        self._check()
        return self._provider.surface_cells()[index]

    def __setitem__(self, index: int, cell: Cell) -> None:
        self._check()
        self._provider.surface_cells()[index] = cell

    def resize(self, width: int, height: int) -> None:
        self._check()
        self._provider.resize_surface(width, height)
