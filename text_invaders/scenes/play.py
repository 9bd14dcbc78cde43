"""
Level countdown and the main play scene.

The play scene owns every entity on the field and advances them once
per frame.  The order of the steps in :meth:`PlayScene.update` is fixed:

    1. steer the ship
    2. bombs against the ship
    3. fire a rocket
    4. rockets
    5. invaders (move, drop bombs, take rocket hits)
    6. bombs
    7. level cleared
    8. game over
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from text_invaders.config import (
    INVADER_SPACING_X,
    INVADER_SPACING_Y,
    INVADER_TOP_ROW,
    LEVEL_INTRO_SECONDS,
)
from text_invaders.models.entity import Bomb, Invader, Rocket, Ship, first_hit
from text_invaders.scenes.base import Scene, SceneKind
from text_invaders.scenes.game_over import GameOverScene
from text_invaders.ui.text import (
    STATUS_X,
    STATUS_Y,
    format_level_intro,
    format_status,
)
from text_invaders.utils.functions import (
    countdown_message,
    level_bonus,
    level_difficulty,
    scale_for_difficulty,
)

if TYPE_CHECKING:
    from text_invaders.game import Game

logger = logging.getLogger(__name__)


# ── Level intro ────────────────────────────────────────────────────────────


class LevelIntroScene(Scene):
    """Counts down before each level, then hands over to play."""

    kind = SceneKind.LEVEL_INTRO

    def __init__(self, countdown: float = LEVEL_INTRO_SECONDS) -> None:
        self.countdown = countdown
        self.countdown_message = "3"

    def update(self, game: Game, delta: float) -> None:
        self.countdown -= delta
        self.countdown_message = countdown_message(
            self.countdown, self.countdown_message
        )
        if self.countdown <= 0:
            game.move_to_state(PlayScene(game))

    def draw(self, game: Game) -> None:
        game.surface.clear()
        game.surface.draw_center(
            format_level_intro(game.level, self.countdown_message)
        )


# ── Play ───────────────────────────────────────────────────────────────────


@dataclass(repr=False, eq=False)
class PlayScene(Scene):
    """A single level of play.

    Built with the game so the difficulty is fixed to the level the
    scene was created for.
    """

    game: Game
    difficulty: float = 0.0
    ship: Optional[Ship] = None
    rockets: list[Rocket] = field(default_factory=list)
    invaders: list[Invader] = field(default_factory=list)
    bombs: list[Bomb] = field(default_factory=list)

    kind = SceneKind.PLAY

    def __post_init__(self) -> None:
        self.difficulty = level_difficulty(
            self.game.level, self.game.config.difficulty_multiplier
        )

    def difficulty_multiplier(self, value: float) -> float:
        return scale_for_difficulty(value, self.difficulty)

    # ── Lifecycle ───────────────────────────────────────────────────────

    def enter(self, game: Game) -> None:
        """Place the ship and the invader formation."""
        config = game.config
        self.ship = Ship(
            x=game.bounds.right / 2,
            y=game.bounds.bottom,
            velocity=config.ship_speed,
        )
        self.invaders = self._create_invaders(
            config.invader_columns,
            config.invader_rows,
            self.difficulty_multiplier(config.invader_velocity),
        )
        self.rockets = []
        self.bombs = []
        logger.debug(
            "Level %d: %d invaders at velocity %.2f",
            game.level, len(self.invaders),
            self.difficulty_multiplier(config.invader_velocity),
        )

    @staticmethod
    def _create_invaders(
        columns: int, rows: int, velocity: float
    ) -> list[Invader]:
        invaders = []
        for column in range(columns):
            for row in range(rows):
                invaders.append(Invader(
                    x=column * INVADER_SPACING_X,
                    y=INVADER_TOP_ROW + row * INVADER_SPACING_Y,
                    velocity=velocity,
                    column=column,
                    row=row,
                ))
        return invaders

    # ── Per-frame update ────────────────────────────────────────────────

    def update(self, game: Game, delta: float) -> None:
        self._move_ship(game, delta)

        bomb = first_hit(self.ship, self.bombs)
        if bomb is not None:
            self.bombs = [b for b in self.bombs if b is not bomb]
            game.lives -= 1
            logger.debug("Ship hit, %d lives left", game.lives)

        if game.is_pressed(game.keys.fire):
            self._fire_rocket(game)

        self.rockets = [
            rocket for rocket in self.rockets
            if rocket.advance(delta, game.bounds)
        ]

        self._move_invaders(game, delta)

        self.bombs = [
            bomb for bomb in self.bombs
            if bomb.advance(delta, game.bounds)
        ]

        # Next level
        if not self.invaders:
            game.score += level_bonus(game.level)
            game.level += 1
            logger.info("Level cleared, score %d", game.score)
            game.move_to_state(LevelIntroScene())

        # Game over
        if game.lives <= 0:
            logger.info("Game over at level %d, score %d",
                        game.level, game.score)
            game.move_to_state(GameOverScene())

    def _move_ship(self, game: Game, delta: float) -> None:
        if game.is_pressed(game.keys.left):
            self.ship.steer(-1, delta)
        if game.is_pressed(game.keys.right):
            self.ship.steer(1, delta)
        self.ship.clamp(game.bounds)

    def _fire_rocket(self, game: Game) -> None:
        """Launch a rocket unless the last one is still cooling down.

        The cooldown runs on the game's real-time clock, not on the
        frame delta.
        """
        now = game.clock()
        if self.rockets:
            last = self.rockets[-1]
            if now - last.fired <= game.config.rocket_cooldown_ms:
                return
        self.rockets.append(Rocket(
            x=self.ship.center(),
            y=self.ship.y,
            velocity=game.config.rocket_velocity,
            fired=now,
        ))

    def _move_invaders(self, game: Game, delta: float) -> None:
        config = game.config
        survivors = []
        for invader in self.invaders:
            if not invader.advance(delta, game.bounds):
                game.lives = 0

            self._drop_bomb(game, invader, delta)

            rocket = first_hit(invader, self.rockets)
            if rocket is not None:
                self.rockets = [r for r in self.rockets if r is not rocket]
                game.score += config.invader_points
                continue
            survivors.append(invader)
        self.invaders = survivors

    def _drop_bomb(self, game: Game, invader: Invader, delta: float) -> None:
        """Give *invader* a ``bomb_rate * delta`` chance to drop a bomb."""
        config = game.config
        chance = config.bomb_rate * delta
        if chance > game.rng.random():
            self.bombs.append(Bomb(
                x=invader.x,
                y=invader.y,
                velocity=game.rng.uniform(
                    config.bomb_min_velocity, config.bomb_max_velocity
                ),
            ))

    # ── Rendering ───────────────────────────────────────────────────────

    def draw(self, game: Game) -> None:
        surface = game.surface
        surface.clear()
        surface.draw(STATUS_X, STATUS_Y,
                     format_status(game.level, game.lives, game.score))
        self.ship.draw(surface, game.glyphs)
        for entity in (*self.rockets, *self.invaders, *self.bombs):
            entity.draw(surface, game.glyphs)
