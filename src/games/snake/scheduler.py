"""
Frame-driven tick scheduler.

The engine never owns a timer. A front-end calls TickScheduler.update()
once per frame with its clock, and the scheduler fires engine.tick()
whenever the engine's current interval has elapsed.
"""
from typing import Optional

from ...core.game_interface import GameInterface


class TickScheduler:
    """
    Repeating signal for a game, re-read after every tick.

    The signal is armed only while the game is running. Leaving the playing
    state (pause, game over) cancels it, and the next update after a
    resume re-arms it from that moment so no stale tick fires right away.
    """

    def __init__(self, game: GameInterface):
        self.game = game
        self.ticks_fired = 0
        self._last_fire_ms: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self._last_fire_ms is not None

    @property
    def next_tick_at(self) -> Optional[int]:
        """Clock value at which the next tick is due, or None if cancelled."""
        if self._last_fire_ms is None:
            return None
        return self._last_fire_ms + self.game.tick_interval_ms

    def cancel(self) -> None:
        self._last_fire_ms = None

    def update(self, now_ms: int) -> bool:
        """
        Fire at most one tick if it is due.

        Args:
            now_ms: Current clock reading in milliseconds

        Returns:
            True if a tick was fired
        """
        if not self.game.is_running():
            self.cancel()
            return False

        if self._last_fire_ms is None:
            self._last_fire_ms = now_ms
            return False

        if now_ms - self._last_fire_ms < self.game.tick_interval_ms:
            return False

        self.game.tick()
        self.ticks_fired += 1
        self._last_fire_ms = now_ms

        if not self.game.is_running():
            self.cancel()
        return True
