"""
Core game controller for Text Invaders.

Owns the configuration, score/level/lives, the scene stack, the
pressed-key set and the character grid, and drives the per-frame
update → draw → render step.  Knows nothing about the display or the
keyboard; the host hands it timestamps, key codes and a render sink.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from text_invaders.config import (
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    GameConfig,
    Glyphs,
    KeyBindings,
)
from text_invaders.models.bounds import Bounds
from text_invaders.scenes.base import Scene
from text_invaders.scenes.welcome import WelcomeScene
from text_invaders.ui.grid import GridSurface, OutOfBounds, RenderSink
from text_invaders.utils.input_handler import GameAction, actions_for_key

logger = logging.getLogger(__name__)


def _default_bounds() -> Bounds:
    return Bounds(right=DEFAULT_COLUMNS, bottom=DEFAULT_ROWS - 1)


def _realtime_ms() -> float:
    return time.monotonic() * 1000


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass(eq=False)
class Game:
    """Top-level game controller.

    ``clock`` returns real-time milliseconds and only paces rocket fire;
    the simulation itself advances by the frame delta passed to
    :meth:`step`.
    """

    config: GameConfig = field(default_factory=GameConfig)
    glyphs: Glyphs = field(default_factory=Glyphs)
    keys: KeyBindings = field(default_factory=KeyBindings)
    bounds: Bounds = field(default_factory=_default_bounds)

    sink: Optional[RenderSink] = field(default=None, repr=False)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    clock: Callable[[], float] = field(default=_realtime_ms, repr=False)

    score: int = 0
    level: int = 1
    lives: int = field(init=False)

    state_stack: list[Scene] = field(default_factory=list)
    pressed_keys: set[int] = field(default_factory=set)
    surface: GridSurface = field(init=False, repr=False)

    _last_timestamp: Optional[float] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.lives = self.config.initial_lives
        self.surface = GridSurface(self.bounds, space=self.glyphs.space)

    # ── Scene stack ─────────────────────────────────────────────────────

    def current_state(self) -> Optional[Scene]:
        return self.state_stack[-1] if self.state_stack else None

    def push_state(self, scene: Scene) -> None:
        """Enter *scene* and put it on top of the stack."""
        scene.enter(self)
        self.state_stack.append(scene)
        logger.debug("Entered %r", scene)

    def pop_state(self) -> None:
        """Leave and drop the current scene, if there is one."""
        current = self.current_state()
        if current is None:
            return
        current.leave(self)
        self.state_stack.pop()
        logger.debug("Left %r", current)

    def move_to_state(self, scene: Scene) -> None:
        """Replace the current scene with *scene*."""
        self.pop_state()
        self.push_state(scene)

    # ── Lifecycle ───────────────────────────────────────────────────────

    def reset(self) -> None:
        """Zero the score and return to the welcome screen."""
        self.level = 1
        self.score = 0
        self.lives = self.config.initial_lives
        self.move_to_state(WelcomeScene())

    def start(self) -> None:
        """Reset the game and treat the next step as the first frame."""
        self._last_timestamp = None
        self.reset()

    # ── Input ───────────────────────────────────────────────────────────

    def key_down(self, code: int) -> None:
        self.pressed_keys.add(code)
        current = self.current_state()
        if current is not None:
            current.key_down(self, code)

    def key_up(self, code: int) -> None:
        self.pressed_keys.discard(code)
        current = self.current_state()
        if current is not None:
            current.key_up(self, code)

    def is_pressed(self, code: int) -> bool:
        return code in self.pressed_keys

    def actions_for(self, code: int) -> frozenset[GameAction]:
        return actions_for_key(code, self.keys)

    # ── Per-frame step ──────────────────────────────────────────────────

    def step(self, timestamp: float) -> bool:
        """Advance one frame at *timestamp* (milliseconds).

        The first frame after :meth:`start` runs with a zero delta.
        Returns True if the sink received new content.
        """
        if self._last_timestamp is None:
            delta = 0.0
        else:
            delta = (timestamp - self._last_timestamp) / 1000
        self._last_timestamp = timestamp

        current = self.current_state()
        if current is None:
            return False

        current.update(self, delta)

        # The update may have moved to another scene; draw whatever is
        # on top now.
        current = self.current_state()
        if current is None:
            return False
        try:
            current.draw(self)
        except OutOfBounds as exc:
            logger.error("Skipping frame render for %r: %s", current, exc)
            return False
        return self.render()

    def render(self) -> bool:
        """Push the grid to the sink if it changed."""
        if self.sink is None:
            return False
        return self.surface.flush(self.sink)
