"""
Abstract leaderboard interface.

The game engine knows nothing about scores leaving the machine. A
front-end hands (player name, final score) to a LeaderboardInterface and
shows the user either the created entry or the error message.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Any, List


class LeaderboardError(Exception):
    """Base class for leaderboard failures. `message` is user-facing."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(LeaderboardError):
    """The name, score or limit was rejected before sending."""


class LeaderboardNetworkError(LeaderboardError):
    """The leaderboard could not be reached."""


class LeaderboardServerError(LeaderboardError):
    """The leaderboard answered with a non-2xx status."""

    def __init__(self, status_code: int):
        super().__init__(f"Server error (status code: {status_code})")
        self.status_code = status_code


class LeaderboardDecodeError(LeaderboardError):
    """The leaderboard answered with something we could not read."""

    def __init__(self, detail: str):
        super().__init__(f"Failed to decode response: {detail}")


# Tried in order; the last one is the naive form Python servers emit
_TIMESTAMP_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f",
]


def parse_timestamp(value: str) -> datetime:
    """
    Parse a leaderboard timestamp into an aware UTC datetime.

    Raises:
        LeaderboardDecodeError: If no known format matches
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    for fmt in _TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    raise LeaderboardDecodeError(
        f"Date string '{value}' does not match expected format"
    )


@dataclass
class LeaderboardEntry:
    """A recorded score."""
    id: int
    player_name: str
    score: int
    timestamp: datetime

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaderboardEntry":
        """
        Build an entry from its JSON shape.

        Raises:
            LeaderboardDecodeError: On missing fields or wrong types
        """
        try:
            entry_id = data["id"]
            name = data["player_name"]
            score = data["score"]
            timestamp = data["timestamp"]
        except (KeyError, TypeError) as e:
            raise LeaderboardDecodeError(f"missing field {e}") from e

        if not isinstance(entry_id, int) or not isinstance(score, int):
            raise LeaderboardDecodeError("id and score must be integers")
        if not isinstance(name, str) or not isinstance(timestamp, str):
            raise LeaderboardDecodeError("player_name and timestamp must be strings")

        return cls(
            id=entry_id,
            player_name=name,
            score=score,
            timestamp=parse_timestamp(timestamp),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "player_name": self.player_name,
            "score": self.score,
            "timestamp": self.timestamp.isoformat(),
        }


class LeaderboardInterface(ABC):
    """Where finished runs are submitted and high scores are read from."""

    @abstractmethod
    def submit_score(self, player_name: str, score: int) -> LeaderboardEntry:
        """
        Record a score.

        Returns:
            The created entry

        Raises:
            LeaderboardError: On any failure
        """
        pass

    @abstractmethod
    def fetch_entries(self, limit: int = 100) -> List[LeaderboardEntry]:
        """
        Get the best entries, highest score first.

        Raises:
            LeaderboardError: On any failure
        """
        pass

    @abstractmethod
    def check_health(self) -> bool:
        """True if the leaderboard is reachable and answering."""
        pass
