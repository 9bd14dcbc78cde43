from text_invaders.models.bounds import Bounds
from text_invaders.models.entity import (
    Bomb,
    Entity,
    EntityKind,
    Invader,
    Rocket,
    Ship,
    first_hit,
)

__all__ = [
    "Bounds",
    "Entity", "EntityKind",
    "Ship", "Rocket", "Invader", "Bomb",
    "first_hit",
]
