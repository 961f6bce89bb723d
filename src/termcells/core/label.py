"""Single-line label rendering.

A label is one row of text drawn into a destination rect. Text that fits is
placed according to its alignment. Text that doesn't fit is truncated by
characters and an ellipsis glyph marks where text was dropped:

    Left     "Hell…"       head kept, ellipsis last
    Right    "…orld"       tail kept, ellipsis first
    Center   "…bcdef…"     middle slice kept, ellipsis on both ends
    centered "abc…fgh"     head and tail kept, one ellipsis in the middle
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from termcells.core.cell import Cell
from termcells.core.color import Color
from termcells.core.rect import Rect
from termcells.core.text import CharCursor

if TYPE_CHECKING:
    from termcells.core.grid import CellGrid
    from termcells.core.storage import CellStorage


class Align(Enum):
    """Horizontal placement of label text inside its rect."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class LabelParams:
    """
    Configuration for one label draw.

    Immutable; derive variants with ``dataclasses.replace``. Strings are
    accepted for ``align`` and coerced to ``Align``.

    Example:
        >>> from dataclasses import replace
        >>> params = replace(DEFAULT_LABEL_PARAMS, align=Align.RIGHT)
        >>> grid.draw_label(Rect(0, 0, 5, 1), params, "Hello World")
    """
    fg: Any = Color.DEFAULT
    bg: Any = Color.DEFAULT
    align: Align = Align.LEFT
    ellipsis: str = '…'
    center_ellipsis: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.align, Align):
            object.__setattr__(self, "align", Align(self.align))
        if len(self.ellipsis) != 1:
            raise ValueError(f"Ellipsis must be a single character, got {self.ellipsis!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain values; colors become their string form."""
        return {
            "fg": str(self.fg),
            "bg": str(self.bg),
            "align": self.align.value,
            "ellipsis": self.ellipsis,
            "center_ellipsis": self.center_ellipsis,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LabelParams:
        """Deserialize from a dictionary, filling gaps with defaults."""
        fg = data.get("fg", Color.DEFAULT)
        bg = data.get("bg", Color.DEFAULT)
        return cls(
            fg=Color.parse(fg) if isinstance(fg, str) else fg,
            bg=Color.parse(bg) if isinstance(bg, str) else bg,
            align=Align(data.get("align", Align.LEFT.value)),
            ellipsis=data.get("ellipsis", '…'),
            center_ellipsis=bool(data.get("center_ellipsis", False)),
        )


DEFAULT_LABEL_PARAMS = LabelParams()


def _draw_forward(
    cells: CellStorage, off: int, n: int, params: LabelParams, cursor: CharCursor
) -> None:
    """Draw up to ``n`` characters from the cursor's front, left to right from ``off``."""
    while n > 0:
        char = cursor.next()
        if char is None:
            break
        cells[off] = Cell(char, params.fg, params.bg)
        off += 1
        n -= 1


def _draw_backward(
    cells: CellStorage, off: int, n: int, params: LabelParams, cursor: CharCursor
) -> None:
    """Draw up to ``n`` characters from the cursor's back, right to left from ``off``."""
    while n > 0:
        char = cursor.prev()
        if char is None:
            break
        cells[off] = Cell(char, params.fg, params.bg)
        off -= 1
        n -= 1


def draw_label(grid: CellGrid, dest: Rect, params: LabelParams, text: str | bytes) -> None:
    """
    Draw ``text`` as a single-line label into ``dest`` on ``grid``.

    Only the top row of ``dest`` is used and it is clipped to the grid
    first, so out-of-range rects draw nothing instead of failing. Cells in
    the row that the label doesn't reach are left untouched.

    Args:
        grid: Grid to draw into
        dest: Destination rect; height is forced to 1
        params: Alignment, ellipsis and colors for every written cell
        text: Label text, ``str`` or UTF-8 ``bytes``
    """
    dest = dest.with_height(1).intersection(grid.bounds())
    if dest.is_empty:
        return

    cells = grid.storage
    width = dest.width
    off = dest.y * grid.width + dest.x
    cursor = CharCursor(text)
    text_len = len(cursor)

    n = text_len
    if text_len > width:
        # Doesn't fit: one column goes to the ellipsis
        n = width - 1
        ellipsis = Cell(params.ellipsis, params.fg, params.bg)

        # Centered ellipsis ignores alignment
        if params.center_ellipsis:
            cells[off + width // 2] = ellipsis
        elif params.align is Align.LEFT:
            cells[off + width - 1] = ellipsis
        elif params.align is Align.CENTER:
            cells[off] = ellipsis
            cells[off + width - 1] = ellipsis
            n -= 1
        else:
            cells[off] = ellipsis

    if n <= 0:
        return

    if params.center_ellipsis and n != text_len:
        head = width // 2
        tail = width - 1 - head
        _draw_forward(cells, off, head, params, cursor)
        _draw_backward(cells, off + width - 1, tail, params, cursor)
        return

    if params.align is Align.LEFT:
        _draw_forward(cells, off, n, params, cursor)
    elif params.align is Align.CENTER:
        if n == text_len:
            _draw_forward(cells, off + (width - n) // 2, n, params, cursor)
        else:
            cursor.skip((text_len - n) // 2)
            _draw_forward(cells, off + 1, n, params, cursor)
    else:
        _draw_backward(cells, off + width - 1, n, params, cursor)
