"""User interface components."""

from .grid import GridSurface, OutOfBounds, RenderSink
from .text import (
    GAME_OVER_MESSAGE,
    WELCOME_MESSAGE,
    format_level_intro,
    format_status,
)

__all__ = [
    "GAME_OVER_MESSAGE",
    "GridSurface",
    "OutOfBounds",
    "RenderSink",
    "WELCOME_MESSAGE",
    "format_level_intro",
    "format_status",
]
