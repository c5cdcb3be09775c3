"""
Leaderboard implementations.
"""

from .local import InMemoryLeaderboard

__all__ = [
    'InMemoryLeaderboard',
]
