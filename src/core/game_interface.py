"""
Abstract game interface.

Games are passive state machines advanced by an external clock. They
expose commands, a tick, and a state snapshot for renderers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    supports_god_mode: bool = True      # Can walls be turned off?


class GameInterface(ABC):
    """
    Abstract base class for externally ticked games.

    Every command must be safe to call in any state: commands that do not
    apply to the current state are ignored, never raised.
    """

    # Current tick interval in milliseconds; the scheduler re-reads it
    tick_interval_ms: int

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to its initial, not yet started state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def start(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @abstractmethod
    def resume(self) -> None:
        pass

    @abstractmethod
    def tick(self) -> Any:
        """
        Advance the game by one step of its clock.

        Returns:
            Game-specific description of what happened
        """
        pass

    @abstractmethod
    def is_running(self) -> bool:
        """True while the game wants clock ticks."""
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
