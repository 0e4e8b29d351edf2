"""Value objects for account and progress pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AccountData:
    """Account settings of the signed-in member."""

    account: str = ""
    alias: str = ""
    location: str = ""
    language: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "account": self.account,
            "alias": self.alias,
            "location": self.location,
            "language": self.language,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccountData:
        return cls(
            account=data.get("account", ""),
            alias=data.get("alias", ""),
            location=data.get("location", ""),
            language=data.get("language", ""),
        )


@dataclass(frozen=True)
class ProgressData:
    """Level and solved-problem progress of the signed-in member."""

    level: str = ""
    solved: int = 0
    percentage: float = 0
    progress: str = ""
    to_the_next: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "solved": self.solved,
            "percentage": self.percentage,
            "progress": self.progress,
            "to_the_next": self.to_the_next,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProgressData:
        return cls(
            level=data.get("level", ""),
            solved=data.get("solved", 0),
            percentage=data.get("percentage", 0),
            progress=data.get("progress", ""),
            to_the_next=data.get("to_the_next", ""),
        )
