"""
Snake game module.

This module registers both Snake variants when imported.
"""

from ..registry import GameRegistry
from .grid import Direction, Point
from .game import SnakeGame, PreySnakeGame, GameState, TickEvent
from .spawn import SpawnPolicy, FoodSpawnPolicy, PreySpawnPolicy, Target
from .scheduler import TickScheduler
from .renderer import SnakeRenderer
from .config import SnakeConfig

for _game_class in (SnakeGame, PreySnakeGame):
    GameRegistry.register(
        game_class=_game_class,
        renderer_class=SnakeRenderer,
        config_class=SnakeConfig
    )

__all__ = [
    'SnakeGame',
    'PreySnakeGame',
    'SnakeRenderer',
    'SnakeConfig',
    'TickScheduler',
    'SpawnPolicy',
    'FoodSpawnPolicy',
    'PreySpawnPolicy',
    'Target',
    'Direction',
    'Point',
    'GameState',
    'TickEvent',
]
