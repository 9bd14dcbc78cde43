"""
Input handler for Text Invaders.

Maps numeric key codes to the logical actions the game understands.
"""

from __future__ import annotations

from enum import Enum, auto

from text_invaders.config import KeyBindings


class GameAction(Enum):
    """Actions the player can trigger."""
    FIRE = auto()
    START = auto()
    LEFT = auto()
    RIGHT = auto()
    RESTART = auto()


def actions_for_key(code: int, keys: KeyBindings) -> frozenset[GameAction]:
    """Return every action bound to *code*.

    Fire and start share a key, so one code can map to two actions.
    Unknown codes map to an empty set.
    """
    bound = {
        GameAction.FIRE: keys.fire,
        GameAction.START: keys.start,
        GameAction.LEFT: keys.left,
        GameAction.RIGHT: keys.right,
        GameAction.RESTART: keys.restart,
    }
    return frozenset(action for action, key in bound.items() if key == code)
