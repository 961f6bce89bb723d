"""Core data structures: cells, rects, grids and label rendering."""

from termcells.core.cell import Cell
from termcells.core.color import Color, ColorMode
from termcells.core.grid import CellGrid
from termcells.core.label import DEFAULT_LABEL_PARAMS, Align, LabelParams, draw_label
from termcells.core.rect import Rect
from termcells.core.storage import (
    CellStorage,
    OwnedStorage,
    SurfaceProvider,
    SurfaceStorage,
    SurfaceUnavailableError,
)
from termcells.core.text import CharCursor

__all__ = [
    "Cell",
    "Color",
    "ColorMode",
    "CellGrid",
    "Align",
    "LabelParams",
    "DEFAULT_LABEL_PARAMS",
    "draw_label",
    "Rect",
    "CellStorage",
    "OwnedStorage",
    "SurfaceProvider",
    "SurfaceStorage",
    "SurfaceUnavailableError",
    "CharCursor",
]
