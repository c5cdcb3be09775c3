"""
Snake Game Core - Pure game logic without rendering.

The engine is a passive state machine: an external scheduler calls tick()
at the current tick interval, and everything else happens through explicit
commands. Invalid commands are ignored rather than raising.
"""
from typing import List, Tuple, Optional, Dict, Any
from enum import Enum, IntEnum
from collections import deque
import random

from ...core.game_interface import GameInterface, GameMetadata
from .config import SnakeConfig
from .grid import Direction, Point
from .spawn import SpawnPolicy, FoodSpawnPolicy, PreySpawnPolicy, Target


class GameState(Enum):
    """Lifecycle of a single run."""
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class TickEvent(IntEnum):
    """What a single tick() did."""
    IGNORED = 0   # not playing
    MOVED = 1
    GREW = 2
    HIT_WALL = 3
    HIT_SELF = 4


MAX_PENDING_DIRECTIONS = 2


class SnakeGame(GameInterface):
    """
    Core Snake game logic with static food.

    The snake moves one cell per tick. Eating the target grows the snake,
    adds to the score and shortens the tick interval down to a floor.
    Running into a wall ends the run unless god mode is on, in which case
    the snake wraps around. Running into itself always ends the run.
    """

    def __init__(
        self,
        config: Optional[SnakeConfig] = None,
        spawn_policy: Optional[SpawnPolicy] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Engine parameters (defaults to SnakeConfig())
            spawn_policy: Target placement policy (defaults per variant)
            seed: Seed for a private random generator
            rng: Random generator to use instead of a seeded one

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or SnakeConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError("Invalid snake config: " + "; ".join(errors))

        self.grid_size = self.config.grid_size
        self.rng = rng if rng is not None else random.Random(seed)
        self.spawn_policy = spawn_policy or self._default_spawn_policy()

        # Session state (initialized in reset)
        self.snake: List[Point] = []
        self.target: Target = Target(Point(0, 0))
        self.direction: Direction = Direction.RIGHT
        self.score: int = 0
        self.tick_interval_ms: int = self.config.initial_interval_ms
        self.god_mode: bool = False
        self.state: GameState = GameState.READY
        self.game_over_reason: Optional[TickEvent] = None
        self._direction_queue: deque = deque()

        self.reset()

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat the food, grow longer, don't bite yourself",
        )

    def _default_spawn_policy(self) -> SpawnPolicy:
        return FoodSpawnPolicy()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def reset(self) -> Dict[str, Any]:
        """
        Reset the session to its Ready defaults. Valid from any state.

        Returns:
            Dictionary containing the initial game state
        """
        center = self.grid_size // 2
        self.snake = [
            Point(center, center),
            Point(center - 1, center),
            Point(center - 2, center),
        ]
        self.direction = Direction.RIGHT
        self._direction_queue.clear()
        self.score = 0
        self.tick_interval_ms = self.config.initial_interval_ms
        self.god_mode = False
        self.state = GameState.READY
        self.game_over_reason = None

        self.spawn_policy.reset()
        self.target = self.spawn_policy.place_target(self.snake, self.grid_size, self.rng)

        return self.get_state()

    def start(self) -> None:
        if self.state == GameState.READY:
            self.state = GameState.PLAYING

    def pause(self) -> None:
        if self.state == GameState.PLAYING:
            self.state = GameState.PAUSED

    def resume(self) -> None:
        if self.state == GameState.PAUSED:
            self.state = GameState.PLAYING

    def toggle_god_mode(self) -> None:
        """Flip wall wrapping on or off. Allowed in any state."""
        self.god_mode = not self.god_mode

    def queue_direction(self, direction: Direction) -> None:
        """
        Queue a turn to be applied on a future tick.

        The request is compared against the last queued direction (or the
        current one if nothing is queued): reversals and repeats are dropped.
        Only the newest two pending turns are kept.
        """
        if self.state != GameState.PLAYING:
            return

        last = self._direction_queue[-1] if self._direction_queue else self.direction
        if direction == last.opposite or direction == last:
            return

        self._direction_queue.append(direction)
        if len(self._direction_queue) > MAX_PENDING_DIRECTIONS:
            self._direction_queue.popleft()

    def tick(self) -> TickEvent:
        """
        Advance the simulation by one step.

        Returns:
            TickEvent describing what happened; IGNORED when not playing
        """
        if self.state != GameState.PLAYING:
            return TickEvent.IGNORED

        # Prey moves before the snake so its walk doesn't react to this move
        self.target = self.spawn_policy.advance_target(
            self.target, self.snake, self.grid_size, self.rng
        )

        if self._direction_queue:
            self.direction = self._direction_queue.popleft()

        new_head = self.snake[0].move(self.direction)

        if not new_head.in_bounds(self.grid_size):
            if not self.god_mode:
                return self._end_game(TickEvent.HIT_WALL)
            new_head = new_head.wrapped(self.grid_size)

        # Checked against the body before the move, tail included
        if new_head in self.snake:
            return self._end_game(TickEvent.HIT_SELF)

        new_body = [new_head] + self.snake
        if new_head == self.target.position:
            self.score += self.config.points_per_target
            self._increase_speed()
            self.snake = new_body
            self.target = self.spawn_policy.place_target(self.snake, self.grid_size, self.rng)
            return TickEvent.GREW

        new_body.pop()
        self.snake = new_body
        return TickEvent.MOVED

    def _increase_speed(self) -> None:
        """Shorten the tick interval, clamped to the configured minimum."""
        self.tick_interval_ms = max(
            self.config.min_interval_ms,
            self.tick_interval_ms - self.config.speed_decrement_ms,
        )

    def _end_game(self, reason: TickEvent) -> TickEvent:
        self.state = GameState.GAME_OVER
        self.game_over_reason = reason
        return reason

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def pending_directions(self) -> Tuple[Direction, ...]:
        return tuple(self._direction_queue)

    @property
    def tick_interval(self) -> float:
        """Current tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    @property
    def visual_direction(self) -> Direction:
        """Direction the head is facing, derived from the head and neck."""
        if len(self.snake) < 2:
            return self.direction
        head, neck = self.snake[0], self.snake[1]
        if head.x > neck.x:
            return Direction.RIGHT
        if head.x < neck.x:
            return Direction.LEFT
        if head.y > neck.y:
            return Direction.DOWN
        if head.y < neck.y:
            return Direction.UP
        return self.direction

    def is_running(self) -> bool:
        return self.state == GameState.PLAYING

    def get_score(self) -> int:
        return self.score

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering or recording.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": self.target.position.to_dict(),
            "facing": int(self.target.facing) if self.target.facing is not None else None,
            "direction": int(self.direction),
            "visual_direction": int(self.visual_direction),
            "pending": [int(d) for d in self._direction_queue],
            "score": self.score,
            "state": self.state.value,
            "game_over": self.state == GameState.GAME_OVER,
            "tick_interval_ms": self.tick_interval_ms,
            "god_mode": self.god_mode,
            "width": self.grid_size,
            "height": self.grid_size,
        }


class PreySnakeGame(SnakeGame):
    """
    Snake variant where the target is a prey that wanders on its own.

    The prey takes a step every second tick using a biased random walk,
    bounces off walls and shies away from the snake's body.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake: Prey",
            id="snake_prey",
            description="Hunt a mouse that runs around the board",
        )

    def _default_spawn_policy(self) -> SpawnPolicy:
        return PreySpawnPolicy(
            turn_probability=self.config.prey_turn_probability,
            move_every=self.config.prey_move_every,
        )
