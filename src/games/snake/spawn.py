"""
Target placement and movement policies.

FoodSpawnPolicy drops a static piece of food on a free cell.
PreySpawnPolicy does the same but the target then wanders on its own
using a biased random walk at a fraction of the snake's tick rate.
"""
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence
import random

from .grid import Direction, Point


DIRECTIONS = list(Direction)


@dataclass(frozen=True)
class Target:
    """Food or prey on the grid. Static food has no facing direction."""
    position: Point
    facing: Optional[Direction] = None


class SpawnPolicy:
    """
    Base policy: uniform placement on free cells, no autonomous movement.

    Every call receives the random generator to use, so a seeded generator
    makes the whole sequence reproducible.
    """

    def reset(self) -> None:
        """Clear any per-run state. Called by the engine on reset."""
        pass

    def place_target(self, snake: Sequence[Point], grid_size: int, rng: random.Random) -> Target:
        """
        Pick a cell uniformly among those not covered by the snake.

        Raises:
            RuntimeError: If the snake covers the whole grid
        """
        return Target(self._free_cell(snake, grid_size, rng))

    def advance_target(
        self,
        target: Target,
        snake: Sequence[Point],
        grid_size: int,
        rng: random.Random,
    ) -> Target:
        """Move the target for one snake tick. Static targets stay put."""
        return target

    @staticmethod
    def _free_cell(snake: Sequence[Point], grid_size: int, rng: random.Random) -> Point:
        occupied = set(snake)
        free: List[Point] = [
            Point(x, y)
            for x in range(grid_size)
            for y in range(grid_size)
            if Point(x, y) not in occupied
        ]
        if not free:
            raise RuntimeError("No free cell left to place a target")
        return rng.choice(free)


class FoodSpawnPolicy(SpawnPolicy):
    """Static food."""


class PreySpawnPolicy(SpawnPolicy):
    """
    Prey that walks around the board.

    Each actual step keeps going straight most of the time and turns to a
    random direction with probability `turn_probability`. Walls reflect the
    prey in place. If the next cell is snake body the prey picks a random new
    facing and stays put; the new facing may be blocked too, in which case
    it simply waits again on its next step.
    """

    def __init__(self, turn_probability: float = 0.3, move_every: int = 2):
        """
        Args:
            turn_probability: Chance per step of picking a new random facing
            move_every: Number of snake ticks per prey step
        """
        self.turn_probability = turn_probability
        self.move_every = move_every
        self._tick_counter = 0

    def reset(self) -> None:
        self._tick_counter = 0

    def place_target(self, snake: Sequence[Point], grid_size: int, rng: random.Random) -> Target:
        position = self._free_cell(snake, grid_size, rng)
        return Target(position, rng.choice(DIRECTIONS))

    def advance_target(
        self,
        target: Target,
        snake: Sequence[Point],
        grid_size: int,
        rng: random.Random,
    ) -> Target:
        self._tick_counter += 1
        if self._tick_counter < self.move_every:
            return target
        self._tick_counter = 0

        facing = target.facing if target.facing is not None else rng.choice(DIRECTIONS)
        if rng.random() < self.turn_probability:
            facing = rng.choice(DIRECTIONS)

        candidate = target.position.move(facing)
        if not candidate.in_bounds(grid_size):
            return replace(target, facing=facing.opposite)
        if candidate in snake:
            return replace(target, facing=rng.choice(DIRECTIONS))
        return Target(candidate, facing)
