"""Scenes for the game's state stack."""

from .base import Scene, SceneKind
from .game_over import GameOverScene
from .play import LevelIntroScene, PlayScene
from .welcome import WelcomeScene

__all__ = [
    "GameOverScene",
    "LevelIntroScene",
    "PlayScene",
    "Scene",
    "SceneKind",
    "WelcomeScene",
]
