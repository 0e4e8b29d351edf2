"""Value objects for leaderboard and level pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NOT_RANKED = 999999


@dataclass(frozen=True)
class RatingData:
    """
    Current place in a leaderboard and the solved counts needed for each milestone.

    Any value that could not be read from the page holds ``NOT_RANKED``.
    """

    place: int = NOT_RANKED
    top100: int = NOT_RANKED
    top50: int = NOT_RANKED
    top25: int = NOT_RANKED
    top10: int = NOT_RANKED
    top5: int = NOT_RANKED
    top1: int = NOT_RANKED

    @property
    def in_top_100(self) -> bool:
        return self.place <= 100

    def to_dict(self) -> dict[str, Any]:
        return {
            "place": self.place,
            "top100": self.top100,
            "top50": self.top50,
            "top25": self.top25,
            "top10": self.top10,
            "top5": self.top5,
            "top1": self.top1,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RatingData:
        return cls(
            place=data.get("place", NOT_RANKED),
            top100=data.get("top100", NOT_RANKED),
            top50=data.get("top50", NOT_RANKED),
            top25=data.get("top25", NOT_RANKED),
            top10=data.get("top10", NOT_RANKED),
            top5=data.get("top5", NOT_RANKED),
            top1=data.get("top1", NOT_RANKED),
        )


@dataclass(frozen=True)
class LevelData:
    """One tile of the levels page: the level label and how many members reached it."""

    level: str = ""
    members: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "members": self.members}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LevelData:
        return cls(level=data.get("level", ""), members=data.get("members", ""))
