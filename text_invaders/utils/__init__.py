"""Utility functions and helpers."""

from .functions import (
    bounds_from_cell_size,
    countdown_message,
    level_bonus,
    level_difficulty,
    scale_for_difficulty,
)
from .input_handler import GameAction, actions_for_key

__all__ = [
    "bounds_from_cell_size",
    "countdown_message",
    "level_bonus",
    "level_difficulty",
    "scale_for_difficulty",
    "GameAction",
    "actions_for_key",
]
