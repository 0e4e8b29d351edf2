"""Aggregate of all scraped records, the unit of caching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .awards import AwardBlockData
from .friends import FriendData
from .profile import AccountData, ProgressData
from .rating import LevelData, RatingData


@dataclass(frozen=True)
class CacheData:
    """Snapshot of one complete fetch cycle."""

    account_data: AccountData
    progress_data: ProgressData
    eulerians_place: str
    location_url: str
    language_url: str
    location_rating: RatingData
    language_rating: RatingData
    level_data: tuple[LevelData, ...] = field(default_factory=tuple)
    awards_data: tuple[AwardBlockData, ...] = field(default_factory=tuple)
    friends: tuple[FriendData, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_data": self.account_data.to_dict(),
            "progress_data": self.progress_data.to_dict(),
            "eulerians_place": self.eulerians_place,
            "location_url": self.location_url,
            "language_url": self.language_url,
            "location_rating": self.location_rating.to_dict(),
            "language_rating": self.language_rating.to_dict(),
            "level_data": [level.to_dict() for level in self.level_data],
            "awards_data": [block.to_dict() for block in self.awards_data],
            "friends": [friend.to_dict() for friend in self.friends],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheData:
        """
        Rebuild a snapshot from its persisted form.

        Raises:
            KeyError: If one of the nested records is missing
            TypeError: If a nested record has an unexpected shape
        """
        return cls(
            account_data=AccountData.from_dict(data["account_data"]),
            progress_data=ProgressData.from_dict(data["progress_data"]),
            eulerians_place=data["eulerians_place"],
            location_url=data["location_url"],
            language_url=data["language_url"],
            location_rating=RatingData.from_dict(data["location_rating"]),
            language_rating=RatingData.from_dict(data["language_rating"]),
            level_data=tuple(LevelData.from_dict(level) for level in data["level_data"]),
            awards_data=tuple(AwardBlockData.from_dict(block) for block in data["awards_data"]),
            friends=tuple(FriendData.from_dict(friend) for friend in data["friends"]),
        )
