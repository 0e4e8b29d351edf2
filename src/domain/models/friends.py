"""Value objects for the friends page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FriendData:
    """One row of the friends table, the member's own row included."""

    rank: str = ""
    username: str = ""
    solved: int = 0
    level: int = 0
    awards: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "rank": self.rank,
            "username": self.username,
            "solved": self.solved,
            "level": self.level,
            "awards": self.awards,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FriendData:
        return cls(
            rank=data.get("rank", ""),
            username=data.get("username", ""),
            solved=data.get("solved", 0),
            level=data.get("level", 0),
            awards=data.get("awards", 0),
        )
