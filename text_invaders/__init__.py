"""
Text Invaders - a Space Invaders clone drawn with text glyphs
on a fixed character grid.
"""

__version__ = "1.0.0"

from .config import GameConfig, Glyphs, KeyBindings
from .game import Game
from .models.bounds import Bounds
from .scenes.base import SceneKind

__all__ = ["Bounds", "Game", "GameConfig", "Glyphs", "KeyBindings", "SceneKind"]
