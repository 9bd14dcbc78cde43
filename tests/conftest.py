"""
Shared fixtures: a small playfield, a quiet config and a hand-driven clock.
"""

import dataclasses
import random

import pytest

from text_invaders.config import GameConfig
from text_invaders.game import Game
from text_invaders.models.bounds import Bounds


class FakeClock:
    """Real-time clock stand-in; tests set ``now`` in milliseconds."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(10_000.0)


@pytest.fixture
def bounds():
    return Bounds(left=0, top=0, right=40, bottom=20)


@pytest.fixture
def config():
    # No random bombs unless a test asks for them
    return dataclasses.replace(GameConfig(), bomb_rate=0)


@pytest.fixture
def game(config, bounds, clock):
    g = Game(config=config, bounds=bounds, clock=clock, rng=random.Random(1))
    g.start()
    return g
