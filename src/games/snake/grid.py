"""
Grid primitives shared by the snake engine and its spawn policies.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((self.value + 2) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) for one step. y grows downwards."""
        return _DELTAS[self]


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


@dataclass(frozen=True)
class Point:
    """A cell on the game grid."""
    x: int
    y: int

    def move(self, direction: Direction) -> "Point":
        """Return the adjacent point one step in the given direction."""
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def in_bounds(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def wrapped(self, size: int) -> "Point":
        """Wrap out-of-range coordinates onto a torus of the given size."""
        return Point((self.x + size) % size, (self.y + size) % size)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}
