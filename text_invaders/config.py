"""
Configuration constants for Text Invaders.

Tunables are kept as module constants and gathered into frozen records
once at start-up.  Nothing reads the constants directly during play;
the :class:`Game` holds the records.
"""

from __future__ import annotations

from dataclasses import dataclass

from text_invaders.models.entity import EntityKind

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
RENDER_WIDTH: int = 800    # pixels, render area handed to the cell probe
RENDER_HEIGHT: int = 600
FONT_SIZE: int = 20
MIN_FONT_SIZE: int = 8
MAX_FONT_SIZE: int = 48
UPDATE_RATE: int = 60      # frames requested per second

# Grid used when no probe has run (tests, headless construction)
DEFAULT_COLUMNS: int = 60
DEFAULT_ROWS: int = 20

# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------
INITIAL_LIVES: int = 3
SHIP_SPEED: float = 20          # cells per second
ROCKET_VELOCITY: float = 20
ROCKET_MAX_FIRE_RATE: float = 2  # rockets per second of real time

# ---------------------------------------------------------------------------
# Invaders
# ---------------------------------------------------------------------------
DIFFICULTY_MULTIPLIER: float = 0.2
INVADER_VELOCITY: float = 10
INVADER_COLUMNS: int = 4
INVADER_ROWS: int = 2
INVADER_POINTS: int = 5
INVADER_SPACING_X: int = 5
INVADER_SPACING_Y: int = 2
INVADER_TOP_ROW: int = 2

# ---------------------------------------------------------------------------
# Bombs
# ---------------------------------------------------------------------------
BOMB_RATE: float = 0.5           # chance per invader per second
BOMB_MIN_VELOCITY: float = 5
BOMB_MAX_VELOCITY: float = 20

# ---------------------------------------------------------------------------
# Scoring / pacing
# ---------------------------------------------------------------------------
LEVEL_BONUS_POINTS: int = 50     # multiplied by the level just cleared
LEVEL_INTRO_SECONDS: float = 3.0

# ---------------------------------------------------------------------------
# Key codes (browser keyCode numbering)
# ---------------------------------------------------------------------------
KEY_SPACE: int = 32
KEY_LEFT: int = 37
KEY_RIGHT: int = 39
KEY_ESCAPE: int = 27


@dataclass(frozen=True)
class GameConfig:
    """Gameplay tunables, read-only once the game is built."""

    initial_lives: int = INITIAL_LIVES
    difficulty_multiplier: float = DIFFICULTY_MULTIPLIER

    ship_speed: float = SHIP_SPEED

    rocket_velocity: float = ROCKET_VELOCITY
    rocket_max_fire_rate: float = ROCKET_MAX_FIRE_RATE

    invader_velocity: float = INVADER_VELOCITY
    invader_columns: int = INVADER_COLUMNS
    invader_rows: int = INVADER_ROWS
    invader_points: int = INVADER_POINTS

    bomb_rate: float = BOMB_RATE
    bomb_min_velocity: float = BOMB_MIN_VELOCITY
    bomb_max_velocity: float = BOMB_MAX_VELOCITY

    @property
    def rocket_cooldown_ms(self) -> float:
        """Minimum real-time gap between two rockets, in milliseconds."""
        return 1000 / self.rocket_max_fire_rate


@dataclass(frozen=True)
class Glyphs:
    """Characters used to paint the grid."""

    space: str = " "
    block: str = "░"
    ship: str = "8"
    rocket: str = "|"
    bomb: str = "O"
    invader: str = "Y"

    def for_kind(self, kind: EntityKind) -> str:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class KeyBindings:
    """Numeric key codes for the logical actions.

    ``fire`` and ``start`` share the space bar.
    """

    fire: int = KEY_SPACE
    left: int = KEY_LEFT
    right: int = KEY_RIGHT
    start: int = KEY_SPACE
    restart: int = KEY_ESCAPE
