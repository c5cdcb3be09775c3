"""
Core abstractions.

Provides the interfaces that games, renderers and leaderboards implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface
from .leaderboard_interface import (
    LeaderboardInterface,
    LeaderboardEntry,
    LeaderboardError,
)

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
    'LeaderboardInterface',
    'LeaderboardEntry',
    'LeaderboardError',
]
