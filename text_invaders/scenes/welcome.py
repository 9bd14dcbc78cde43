"""
Welcome screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from text_invaders.scenes.base import Scene, SceneKind
from text_invaders.scenes.play import LevelIntroScene
from text_invaders.ui.text import WELCOME_MESSAGE
from text_invaders.utils.input_handler import GameAction

if TYPE_CHECKING:
    from text_invaders.game import Game


class WelcomeScene(Scene):
    kind = SceneKind.WELCOME

    def draw(self, game: Game) -> None:
        game.surface.clear()
        game.surface.draw_center(WELCOME_MESSAGE)

    def key_up(self, game: Game, code: int) -> None:
        if GameAction.START in game.actions_for(code):
            game.move_to_state(LevelIntroScene())
