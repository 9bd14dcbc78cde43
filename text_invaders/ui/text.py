"""
UI text for Text Invaders.

Screen messages and the HUD status line.
"""

from __future__ import annotations

WELCOME_MESSAGE: str = 'Welcome Press "Space"'
GAME_OVER_MESSAGE: str = 'Game Over, Press "Escape" to restart'

STATUS_X: int = 1
STATUS_Y: int = 0


def format_status(level: int, lives: int, score: int) -> str:
    return f"Level {level} - Lives {lives} - Score {score}"


def format_level_intro(level: int, countdown_message: str) -> str:
    return f"Start Level {level} in {countdown_message}"
