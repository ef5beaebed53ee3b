import os

# Headless pygame for rendering/event tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from src.snake.game import GameState
from src.snake.config import RIGHT


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_state(rng):
    """Build a GameState with an explicit snake/food/direction."""

    def _make(snake, food, direction=RIGHT, score=0):
        return GameState(
            snake=list(snake),
            food=food,
            direction=direction,
            pending=direction,
            score=score,
            rng=rng,
        )

    return _make
