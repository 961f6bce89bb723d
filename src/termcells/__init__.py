"""
termcells: terminal cell grids and single-line labels

The drawing layer between an application's layout code and the terminal.

Quick Start:
    >>> from termcells import CellGrid, Rect, DEFAULT_LABEL_PARAMS
    >>> grid = CellGrid(5, 1)
    >>> grid.draw_label(Rect(0, 0, 5, 1), DEFAULT_LABEL_PARAMS, "Hello World")
    >>> grid.row_text(0)
    'Hell…'

Features:
    - Row-major cell grid with clipped fill and capacity-reusing resize
    - Rect intersection for clipping every draw to the grid
    - Labels with left/center/right alignment and ellipsis truncation,
      including a centered-ellipsis mode keeping head and tail
    - Character-accurate truncation of multi-byte text
    - Grids bound directly to a terminal backend's live screen surface
    - Render to ANSI escape sequences or plain text
"""

__version__ = "0.1.0"

# Core types
from termcells.core.cell import Cell
from termcells.core.color import Color
from termcells.core.grid import CellGrid
from termcells.core.label import DEFAULT_LABEL_PARAMS, Align, LabelParams
from termcells.core.rect import Rect
from termcells.core.storage import SurfaceUnavailableError

# Backend
from termcells.backend.terminal import TerminalBackend

# Rendering
from termcells.render.terminal import TerminalRenderer
from termcells.render.text import TextRenderer

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "CellGrid",
    "Align",
    "LabelParams",
    "DEFAULT_LABEL_PARAMS",
    "Rect",
    "SurfaceUnavailableError",
    # Backend
    "TerminalBackend",
    # Rendering
    "TerminalRenderer",
    "TextRenderer",
]
