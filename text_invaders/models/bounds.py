"""
Playfield bounds in grid-cell units.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Integer rectangle every entity and every grid write must respect.

    ``right`` doubles as the number of columns in a row and ``bottom`` is
    the index of the last row, so a grid spans ``right - left`` columns
    and ``bottom - top + 1`` rows.
    """

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def columns(self) -> int:
        return max(self.right - self.left, 0)

    @property
    def rows(self) -> int:
        return max(self.bottom - self.top + 1, 0)

    def contains(self, x: int, y: int) -> bool:
        """True if the cell (x, y) lies inside the rectangle, edges included."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom
