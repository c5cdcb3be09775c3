"""
Pytest configuration and fixtures for the Snake tests.

Pygame runs against SDL's dummy drivers so the renderer can be tested
without a display.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.games.snake import (  # noqa: E402
    FoodSpawnPolicy,
    Point,
    SnakeConfig,
    SnakeGame,
    Target,
)


class ScriptedSpawnPolicy(FoodSpawnPolicy):
    """
    Places targets at pre-arranged cells, then falls back to random cells.

    Records every snake it was asked to place around so tests can check
    what the engine passed in.
    """

    def __init__(self, positions):
        self.positions = [Point(*p) for p in positions]
        self.calls = []

    def place_target(self, snake, grid_size, rng):
        self.calls.append(list(snake))
        if self.positions:
            return Target(self.positions.pop(0))
        return super().place_target(snake, grid_size, rng)


@pytest.fixture
def scripted_policy():
    """Factory for a ScriptedSpawnPolicy."""
    return ScriptedSpawnPolicy


@pytest.fixture
def make_game():
    """
    Build a SnakeGame with targets at the given cells.

    The first position is used by the constructor's reset(); later ones
    are used after each growth move.
    """
    def _make(targets=((0, 0),), config=None, seed=1234, started=True):
        game = SnakeGame(
            config=config or SnakeConfig(),
            spawn_policy=ScriptedSpawnPolicy(targets),
            seed=seed,
        )
        if started:
            game.start()
        return game
    return _make


@pytest.fixture
def config_dir(tmp_path):
    """A config tree with a default file and one game override."""
    (tmp_path / "games").mkdir()
    (tmp_path / "default.yaml").write_text(
        "game:\n"
        "  grid_size: 20\n"
        "  points_per_target: 10\n"
        "speed:\n"
        "  initial_ms: 300\n"
        "  min_ms: 80\n"
        "  decrement_ms: 10\n"
        "logging:\n"
        "  verbose: false\n"
    )
    (tmp_path / "games" / "snake_prey.yaml").write_text(
        "game:\n"
        "  grid_size: 15\n"
        "prey:\n"
        "  turn_probability: 0.5\n"
        "  unknown_key: 1\n"
    )
    return tmp_path
