"""
Scene base class for the game's state stack.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from text_invaders.game import Game


class SceneKind(Enum):
    WELCOME = auto()
    LEVEL_INTRO = auto()
    PLAY = auto()
    GAME_OVER = auto()


class Scene:
    """One entry of the state stack.

    Every hook is a no-op here; concrete scenes override the ones they
    react to.  ``enter`` runs before the scene is pushed and ``leave``
    before it is popped.
    """

    kind: SceneKind

    def enter(self, game: Game) -> None:
        pass

    def leave(self, game: Game) -> None:
        pass

    def update(self, game: Game, delta: float) -> None:
        pass

    def draw(self, game: Game) -> None:
        pass

    def key_down(self, game: Game, code: int) -> None:
        pass

    def key_up(self, game: Game, code: int) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
