import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

from components.position import Position  # noqa: E402
from game_instances.session import GameSession  # noqa: E402
from schemas.config import GameConfig  # noqa: E402


@pytest.fixture
def config() -> GameConfig:
    # 100x100 window, 10 cells across: a 10x10 grid of 10px cells
    return GameConfig(window_width=100, window_height=100, cells_across=10, seed=7)


@pytest.fixture
def session(config: GameConfig) -> GameSession:
    game = GameSession(config, rng=random.Random(7))
    # Park the fruit in a corner so nothing is eaten unless a test wants it
    game.fruit.position = Position(x=0, y=0)
    return game


def add_tail(game: GameSession, *cells: tuple[int, int]):
    for x, y in cells:
        game.snake.grow(game.factory, Position(x=x, y=y), game.config.colors.tail)
