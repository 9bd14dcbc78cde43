"""
Game entities for Text Invaders.

Implements the Ship, Rocket, Invader and Bomb pieces.  All four share
one data layout (position, size, velocity, kind) and one behaviour
table (hit-test, sprite, draw); each kind adds only its own movement
rule.

Positions are real numbers.  Drawing truncates them to grid cells.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, TypeVar

if TYPE_CHECKING:
    from text_invaders.config import Glyphs
    from text_invaders.models.bounds import Bounds
    from text_invaders.ui.grid import GridSurface


class EntityKind(Enum):
    """Entity kinds; the value names the glyph used to draw the kind."""
    SHIP = "ship"
    ROCKET = "rocket"
    INVADER = "invader"
    BOMB = "bomb"


# ── Base entity ────────────────────────────────────────────────────────────


@dataclass
class Entity:
    """Shared state and behaviour for every piece on the playfield."""

    x: float
    y: float
    velocity: float = 0.0
    width: int = 1
    height: int = 1
    kind: EntityKind = field(default=EntityKind.SHIP, init=False)
    _sprite: str = field(default="", init=False, repr=False, compare=False)

    def hit(self, other: Entity) -> bool:
        """Return True if this entity's origin lies inside *other*'s box.

        Only the (x, y) corner of ``self`` is tested, and both edges of
        *other*'s box count as inside.
        """
        return (
            other.x <= self.x <= other.x + other.width
            and other.y <= self.y <= other.y + other.height
        )

    def center(self) -> float:
        if self.width > 1:
            return self.x + self.width / 2
        return self.x

    def sprite(self, glyph: str) -> str:
        """Return ``width`` copies of *glyph*, built on first use."""
        if not self._sprite:
            self._sprite = glyph * self.width
        return self._sprite

    def draw(self, surface: GridSurface, glyphs: Glyphs) -> None:
        sprite = self.sprite(glyphs.for_kind(self.kind))
        for row in range(self.height):
            surface.draw(self.x, self.y + row, sprite)


# ── Concrete kinds ─────────────────────────────────────────────────────────


@dataclass
class Ship(Entity):
    """The player's ship.  Moves sideways along the bottom row."""

    kind: EntityKind = field(default=EntityKind.SHIP, init=False)

    def steer(self, direction: int, delta: float) -> None:
        """Move by ``direction * velocity * delta`` (direction is -1 or 1)."""
        self.x += direction * self.velocity * delta

    def clamp(self, bounds: Bounds) -> None:
        """Pull the ship back so it fits between the side walls."""
        if self.x < bounds.left:
            self.x = bounds.left
        if self.x + self.width > bounds.right:
            self.x = bounds.right - self.width


@dataclass
class Rocket(Entity):
    """Player shot travelling up the screen.

    ``fired`` is the real-time clock reading (milliseconds) at launch and
    drives the fire-rate cooldown.
    """

    fired: float = 0.0
    kind: EntityKind = field(default=EntityKind.ROCKET, init=False)

    def advance(self, delta: float, bounds: Bounds) -> bool:
        """Move up; return False once the rocket has left the top."""
        self.y -= delta * self.velocity
        return self.y >= bounds.top


@dataclass
class Invader(Entity):
    """Invader marching side to side and stepping down at each wall.

    ``column`` and ``row`` record where in the formation it was created.
    """

    column: int = 0
    row: int = 0
    kind: EntityKind = field(default=EntityKind.INVADER, init=False)

    def advance(self, delta: float, bounds: Bounds) -> bool:
        """Move one step; return False if the invader has landed."""
        self.x += self.velocity * delta

        if self.x < bounds.left:
            self.x = bounds.left
            self._turn()
        if self.x + self.width > bounds.right:
            self.x = bounds.right - self.width
            self._turn()

        return self.y <= bounds.bottom

    def _turn(self) -> None:
        self.y += 1
        self.velocity *= -1


@dataclass
class Bomb(Entity):
    """Invader shot falling towards the ship."""

    kind: EntityKind = field(default=EntityKind.BOMB, init=False)

    def advance(self, delta: float, bounds: Bounds) -> bool:
        """Move down; return False once the bomb is a row past the bottom."""
        self.y += delta * self.velocity
        return self.y <= bounds.bottom + 1


# ── Collision helpers ──────────────────────────────────────────────────────

E = TypeVar("E", bound=Entity)


def first_hit(victim: Entity, attackers: Iterable[E]) -> Optional[E]:
    """Return the first attacker whose origin lies inside *victim*."""
    for attacker in attackers:
        if attacker.hit(victim):
            return attacker
    return None
