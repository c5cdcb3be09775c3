"""
In-memory leaderboard for a local play session.

Keeps scores for as long as the process lives. Validation and ordering
match what a remote leaderboard is expected to do, so the front-end can
handle both the same way.
"""
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..core.leaderboard_interface import (
    InvalidInputError,
    LeaderboardEntry,
    LeaderboardInterface,
)


MAX_NAME_LENGTH = 50
MAX_FETCH_LIMIT = 1000


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryLeaderboard(LeaderboardInterface):
    """Leaderboard held in a list."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            clock: Returns the timestamp for new entries (defaults to UTC now)
        """
        self._clock = clock or _utc_now
        self._entries: List[LeaderboardEntry] = []
        self._next_id = 1

    def submit_score(self, player_name: str, score: int) -> LeaderboardEntry:
        name = (player_name or "").strip()
        if not name:
            raise InvalidInputError("Player name must not be empty")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidInputError(
                f"Player name must be at most {MAX_NAME_LENGTH} characters"
            )
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise InvalidInputError(f"Score must be a non-negative integer, got {score!r}")

        entry = LeaderboardEntry(
            id=self._next_id,
            player_name=name,
            score=score,
            timestamp=self._clock(),
        )
        self._next_id += 1
        self._entries.append(entry)
        return entry

    def fetch_entries(self, limit: int = 100) -> List[LeaderboardEntry]:
        if not (1 <= limit <= MAX_FETCH_LIMIT):
            raise InvalidInputError(f"Limit must be between 1 and {MAX_FETCH_LIMIT}")
        ranked = sorted(self._entries, key=lambda e: (-e.score, e.timestamp, e.id))
        return ranked[:limit]

    def check_health(self) -> bool:
        return True

    def best_score(self) -> int:
        """Highest score recorded so far, 0 if none."""
        return max((e.score for e in self._entries), default=0)

    def __len__(self) -> int:
        return len(self._entries)
