"""Shared fixtures: page snapshots and a sample statistics snapshot."""

from pathlib import Path

import pytest

from domain.models import (
    AccountData,
    AwardBlockData,
    AwardData,
    CacheData,
    FriendData,
    LevelData,
    ProgressData,
    RatingData,
)
from domain.models.rating import NOT_RANKED

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def html():
    """Loader for the stored page snapshots."""
    return read_fixture


@pytest.fixture
def location_rating() -> RatingData:
    return RatingData(place=37, top100=1500, top50=1750, top25=1875, top10=1950, top5=1975, top1=1995)


@pytest.fixture
def language_rating() -> RatingData:
    return RatingData(
        place=NOT_RANKED,
        top100=NOT_RANKED,
        top50=NOT_RANKED,
        top25=750,
        top10=900,
        top5=950,
        top1=990,
    )


@pytest.fixture
def award_blocks() -> tuple[AwardBlockData, ...]:
    return (
        AwardBlockData(
            name="Problem Awards",
            awards=(
                AwardData(
                    award="Baby Steps",
                    link="https://projecteuler.net/award=1",
                    description="Solve three problems",
                    is_completed=True,
                    progress="",
                    percentage=0,
                    members="84,203 members",
                ),
                AwardData(
                    award="Decathlete",
                    link="https://projecteuler.net/award=2",
                    description="Solve ten consecutive problems",
                    is_completed=False,
                    progress="4 / 10",
                    percentage=40,
                    members="1,204 members",
                ),
                AwardData(
                    award="Fibonacci Fever",
                    link="https://projecteuler.net/award=3",
                    description="Solve the first twelve Fibonacci numbered problems",
                    is_completed=False,
                    progress="5 / 12",
                    percentage=41.67,
                    members="900 members",
                ),
            ),
        ),
        AwardBlockData(
            name="Solve Awards",
            awards=(
                AwardData(
                    award="Prime Obsession",
                    link="https://projecteuler.net/award=20",
                    description="Solve fifty prime numbered problems",
                    is_completed=False,
                    progress="12 / 50",
                    percentage=24,
                    members="3,117 members",
                ),
            ),
        ),
    )


@pytest.fixture
def snapshot(location_rating, language_rating, award_blocks) -> CacheData:
    """Snapshot matching the stored page fixtures."""
    return CacheData(
        account_data=AccountData(
            account="euler_fan", alias="EulerFan", location="Russia", language="Python"
        ),
        progress_data=ProgressData(
            level="Level 3",
            solved=87,
            percentage=9.4,
            progress="Solved 87 out of 925 problems (9.4%)",
            to_the_next="13 problems to the next level",
        ),
        eulerians_place="1,234th",
        location_url="https://projecteuler.net/location=Russia",
        language_url="https://projecteuler.net/language=Python",
        location_rating=location_rating,
        language_rating=language_rating,
        level_data=(
            LevelData(level="Level 1", members="97,123 members"),
            LevelData(level="Level 2", members="41,870 members"),
            LevelData(level="Level 3", members="20,412 members"),
            LevelData(level="Level 4", members="11,055 members"),
            LevelData(level="Level 5", members="6,904 members"),
        ),
        awards_data=award_blocks,
        friends=(
            FriendData(rank="1st", username="Gauss", solved=412, level=16, awards=21),
            FriendData(rank="2nd", username="EulerFan", solved=87, level=3, awards=4),
            FriendData(rank="3rd", username="Noether", solved=40, level=1, awards=2),
            FriendData(rank="4th", username="Ramanujan", solved=12, level=0, awards=1),
        ),
    )
