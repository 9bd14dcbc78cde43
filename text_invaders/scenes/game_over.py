"""
Game-over screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from text_invaders.scenes.base import Scene, SceneKind
from text_invaders.ui.text import GAME_OVER_MESSAGE
from text_invaders.utils.input_handler import GameAction

if TYPE_CHECKING:
    from text_invaders.game import Game


class GameOverScene(Scene):
    """Shown once the last life is lost; the restart key resets the game."""

    kind = SceneKind.GAME_OVER

    def draw(self, game: Game) -> None:
        game.surface.clear()
        game.surface.draw_center(GAME_OVER_MESSAGE)

    def key_up(self, game: Game, code: int) -> None:
        if GameAction.RESTART in game.actions_for(code):
            game.reset()
