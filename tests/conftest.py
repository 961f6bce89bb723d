"""Shared fixtures for grid and backend tests."""

import io
from dataclasses import replace
from typing import Callable

import pytest

from termcells.backend.terminal import TerminalBackend, TerminalSize
from termcells.core.cell import Cell
from termcells.core.grid import CellGrid
from termcells.core.label import DEFAULT_LABEL_PARAMS, Align, LabelParams
from termcells.core.rect import Rect


def _snapshot(grid: CellGrid) -> list[Cell]:
    return [cell for row in grid.rows() for cell in row]


@pytest.fixture
def snapshot() -> Callable[[CellGrid], list[Cell]]:
    """Copy every cell of a grid, row-major."""
    return _snapshot


@pytest.fixture
def grid() -> CellGrid:
    """A 10x4 grid of blank cells."""
    return CellGrid(10, 4)


@pytest.fixture
def draw_row() -> Callable[..., list[str]]:
    """Draw a label into a fresh one-row grid and return its characters.

    Untouched cells stay as '.' so tests can tell them apart from drawn
    spaces.
    """
    def _draw(
        text: str | bytes,
        width: int,
        align: Align = Align.LEFT,
        center_ellipsis: bool = False,
        params: LabelParams = DEFAULT_LABEL_PARAMS,
    ) -> list[str]:
        row = CellGrid(width, 1)
        row.fill(row.bounds(), Cell('.'))
        params = replace(params, align=align, center_ellipsis=center_ellipsis)
        row.draw_label(Rect(0, 0, width, 1), params, text)
        return [cell.char for cell in row.row(0)] if width else []

    return _draw


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def backend(stream: io.StringIO) -> TerminalBackend:
    """Backend writing to a StringIO with a fixed 12x3 screen."""
    return TerminalBackend(stream=stream, size=TerminalSize(rows=3, cols=12))
