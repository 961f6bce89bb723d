"""Rect - integer rectangle used to address and clip grid regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class _Sized(Protocol):
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned rectangle covering ``[x, x+width) x [y, y+height)``.

    Rects are plain values: every operation returns a new Rect. A rect
    with zero width or height is empty and drawing into it does nothing.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def bounds(cls, grid: _Sized) -> Rect:
        """Rect covering every cell of a grid."""
        return cls(0, 0, grid.width, grid.height)

    @property
    def right(self) -> int:
        """First column to the right of the rect."""
        return self.x + max(self.width, 0)

    @property
    def bottom(self) -> int:
        """First row below the rect."""
        return self.y + max(self.height, 0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: Rect) -> Rect:
        """
        Return the region covered by both rects.

        Rects that don't overlap produce ``Rect(0, 0, 0, 0)``, never a
        negative size.
        """
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        width = min(self.right, other.right) - x
        height = min(self.bottom, other.bottom) - y
        if width <= 0 or height <= 0:
            return Rect()
        return Rect(x, y, width, height)

    def intersects(self, other: Rect) -> bool:
        return not self.intersection(other).is_empty

    def contains(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) lies inside the rect."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def with_height(self, height: int) -> Rect:
        return Rect(self.x, self.y, self.width, height)
