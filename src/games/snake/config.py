"""
Snake game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ...utils.config_loader import Config


@dataclass
class SnakeConfig:
    """Configuration for the Snake engine."""

    # Square grid side in cells
    grid_size: int = 20

    # Tick interval in milliseconds
    initial_interval_ms: int = 300
    min_interval_ms: int = 80
    speed_decrement_ms: int = 10

    points_per_target: int = 10

    # Prey variant
    prey_turn_probability: float = 0.3
    prey_move_every: int = 2

    def validate(self) -> List[str]:
        """Return a list of problems; empty when the config is usable."""
        errors = []
        if self.grid_size < 4:
            errors.append(f"grid_size must be >= 4, got {self.grid_size}")
        if self.min_interval_ms <= 0:
            errors.append(f"min_interval_ms must be > 0, got {self.min_interval_ms}")
        if self.initial_interval_ms < self.min_interval_ms:
            errors.append(
                f"initial_interval_ms ({self.initial_interval_ms}) must be >= "
                f"min_interval_ms ({self.min_interval_ms})"
            )
        if self.speed_decrement_ms <= 0:
            errors.append(f"speed_decrement_ms must be > 0, got {self.speed_decrement_ms}")
        if self.points_per_target <= 0:
            errors.append(f"points_per_target must be > 0, got {self.points_per_target}")
        if not (0.0 <= self.prey_turn_probability <= 1.0):
            errors.append(
                f"prey_turn_probability must be in [0, 1], got {self.prey_turn_probability}"
            )
        if self.prey_move_every < 1:
            errors.append(f"prey_move_every must be >= 1, got {self.prey_move_every}")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "grid_size": self.grid_size,
            "points_per_target": self.points_per_target,
            "speed": {
                "initial_ms": self.initial_interval_ms,
                "min_ms": self.min_interval_ms,
                "decrement_ms": self.speed_decrement_ms,
            },
            "prey": {
                "turn_probability": self.prey_turn_probability,
                "move_every": self.prey_move_every,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary."""
        speed = data.get("speed", {})
        prey = data.get("prey", {})
        return cls(
            grid_size=data.get("grid_size", 20),
            points_per_target=data.get("points_per_target", 10),
            initial_interval_ms=speed.get("initial_ms", 300),
            min_interval_ms=speed.get("min_ms", 80),
            speed_decrement_ms=speed.get("decrement_ms", 10),
            prey_turn_probability=prey.get("turn_probability", 0.3),
            prey_move_every=prey.get("move_every", 2),
        )

    @classmethod
    def from_config(cls, config: "Config") -> "SnakeConfig":
        """Build the engine config from the application config."""
        return cls(
            grid_size=config.game.grid_size,
            points_per_target=config.game.points_per_target,
            initial_interval_ms=config.speed.initial_ms,
            min_interval_ms=config.speed.min_ms,
            speed_decrement_ms=config.speed.decrement_ms,
            prey_turn_probability=config.prey.turn_probability,
            prey_move_every=config.prey.move_every,
        )
