"""Domain models package."""

from .awards import AwardBlockData, AwardData
from .friends import FriendData
from .profile import AccountData, ProgressData
from .rating import NOT_RANKED, LevelData, RatingData
from .snapshot import CacheData
from .tasks import PersonalTask, Source

__all__ = [
    "NOT_RANKED",
    "AccountData",
    "AwardBlockData",
    "AwardData",
    "CacheData",
    "FriendData",
    "LevelData",
    "PersonalTask",
    "ProgressData",
    "RatingData",
    "Source",
]
