"""Value objects for award pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AwardData:
    """Progress of the member towards a single award."""

    award: str = ""
    link: str = ""
    description: str = ""
    is_completed: bool = False
    progress: str = ""
    percentage: float = 0
    members: str = "0 members"

    def to_dict(self) -> dict[str, Any]:
        return {
            "award": self.award,
            "link": self.link,
            "description": self.description,
            "is_completed": self.is_completed,
            "progress": self.progress,
            "percentage": self.percentage,
            "members": self.members,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AwardData:
        return cls(
            award=data.get("award", ""),
            link=data.get("link", ""),
            description=data.get("description", ""),
            is_completed=data.get("is_completed", False),
            progress=data.get("progress", ""),
            percentage=data.get("percentage", 0),
            members=data.get("members", "0 members"),
        )


@dataclass(frozen=True)
class AwardBlockData:
    """A named category of awards."""

    name: str = ""
    awards: tuple[AwardData, ...] = field(default_factory=tuple)

    @property
    def completed_count(self) -> int:
        return sum(1 for award in self.awards if award.is_completed)

    @property
    def uncompleted(self) -> list[AwardData]:
        return [award for award in self.awards if not award.is_completed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "awards": [award.to_dict() for award in self.awards],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AwardBlockData:
        return cls(
            name=data.get("name", ""),
            awards=tuple(AwardData.from_dict(award) for award in data.get("awards", [])),
        )
