"""
Shared helpers for Text Invaders.

Cell-probe arithmetic, difficulty scaling and scoring rules used by the
scenes and the host.
"""

from __future__ import annotations

from text_invaders.config import LEVEL_BONUS_POINTS
from text_invaders.models.bounds import Bounds


# ── Display probe ──────────────────────────────────────────────────────────


def bounds_from_cell_size(
    width_px: int,
    height_px: int,
    cell_width: int,
    line_height: int,
) -> Bounds:
    """Derive the grid bounds for a render area of the given pixel size.

    ``right`` is the number of whole glyphs that fit across and
    ``bottom`` the number of whole lines that fit down.
    """
    return Bounds(
        left=0,
        top=0,
        right=int(width_px // cell_width),
        bottom=int(height_px // line_height),
    )


# ── Level helpers ──────────────────────────────────────────────────────────


def level_difficulty(level: int, multiplier: float) -> float:
    return level * multiplier


def scale_for_difficulty(value: float, difficulty: float) -> float:
    """Increase *value* by *difficulty* times itself."""
    return value + (difficulty * value)


def level_bonus(level: int) -> int:
    """Bonus awarded for clearing *level*."""
    return level * LEVEL_BONUS_POINTS


def countdown_message(countdown: float, current: str = "3") -> str:
    """Return the digit shown during the level countdown.

    Switches to "2" below two seconds and "1" below one second.
    """
    if countdown < 1:
        return "1"
    if countdown < 2:
        return "2"
    return current
