"""
Games module.

Import this module to populate the GameRegistry.
"""

from .registry import GameRegistry

# Each game's __init__.py calls GameRegistry.register()
from . import snake

__all__ = [
    'GameRegistry',
]
