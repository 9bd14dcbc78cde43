"""
Character grid the game draws into.

The grid is a list of fixed-width row strings.  Scenes clear it and
write text into it every frame; :meth:`GridSurface.flush` hands the
joined text to the display sink only when it differs from what the sink
last received.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from text_invaders.models.bounds import Bounds

RenderSink = Callable[[str], None]

LINE_SEPARATOR: str = "\n"


class OutOfBounds(IndexError):
    """A grid write started outside the bounds rectangle."""

    def __init__(self, x: int, y: int, bounds: Bounds) -> None:
        super().__init__(
            f"Out of bounds: ({x}, {y}) not in "
            f"[{bounds.left}, {bounds.right}] x [{bounds.top}, {bounds.bottom}]"
        )
        self.x = x
        self.y = y


@dataclass
class GridSurface:
    """Fixed-size text buffer with bounded writes."""

    bounds: Bounds
    space: str = " "
    _content: list[str] = field(default_factory=list, repr=False)
    _flushed: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.clear()

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple(self._content)

    @property
    def content(self) -> str:
        return LINE_SEPARATOR.join(self._content)

    def clear(self) -> None:
        """Reset every cell to the space glyph."""
        blank = self.space * self.bounds.columns
        self._content = [blank] * self.bounds.rows

    def draw(self, x: float, y: float, text: str) -> None:
        """Write *text* starting at column *x* of row *y*.

        Coordinates are truncated to ints.  Raises :class:`OutOfBounds`
        if the starting cell is outside the bounds; characters that run
        past the end of the row are dropped.
        """
        col, row = int(x), int(y)
        if not self.bounds.contains(col, row):
            raise OutOfBounds(col, row, self.bounds)

        line = self._content[row - self.bounds.top]
        start = col - self.bounds.left
        end = min(start + len(text), len(line))
        self._content[row - self.bounds.top] = (
            line[:start] + text[:end - start] + line[end:]
        )

    def draw_center(self, text: str) -> None:
        """Write *text* centred horizontally on the middle row."""
        x = 0
        if len(text) < self.bounds.right:
            x = int(self.bounds.right / 2 - len(text) / 2)
        y = self.bounds.bottom // 2
        self.draw(x, y, text)

    def flush(self, sink: RenderSink) -> bool:
        """Send the grid to *sink* if it changed since the last flush.

        Returns True if the sink was called.
        """
        content = self.content
        if content == self._flushed:
            return False
        sink(content)
        self._flushed = content
        return True
