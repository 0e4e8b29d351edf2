"""Rules for milestones, level progress and award priority."""

from dataclasses import dataclass
from typing import Iterable, Optional

from domain.models import AwardBlockData, AwardData, ProgressData, RatingData
from domain.parsers.numbers import count_from_text, first_integer, round_half_up

PROBLEMS_PER_LEVEL = 25
TOP_1_MESSAGE = "You are in the Top 1"


@dataclass(frozen=True)
class Milestone:
    """A leaderboard rank limit and the solved count needed to reach it."""

    limit: int
    top: int
    title: str


@dataclass(frozen=True)
class TopResult:
    """Distance to the next milestone the member can reach."""

    message: str
    percentage: int
    rest: int


def milestones(rating: RatingData) -> list[Milestone]:
    """Milestones ordered from the loosest (Top 100) to the tightest (Top 1)."""
    return [
        Milestone(limit=100, top=rating.top100, title="Top 100"),
        Milestone(limit=50, top=rating.top50, title="Top 50"),
        Milestone(limit=25, top=rating.top25, title="Top 25"),
        Milestone(limit=10, top=rating.top10, title="Top 10"),
        Milestone(limit=5, top=rating.top5, title="Top 5"),
        Milestone(limit=1, top=rating.top1, title="Top 1"),
    ]


def remaining(top: int, solved: int) -> int:
    """Problems still needed to overtake the member holding ``top`` solved problems."""
    return top - solved + 1


def active_milestone(rating: RatingData) -> Optional[Milestone]:
    """First milestone whose limit is still looser than the current place."""
    for milestone in milestones(rating):
        if rating.place > milestone.limit:
            return milestone
    return None


def determine_top(solved: int, rating: RatingData) -> TopResult:
    """
    Work out how far the member is from the next milestone in a leaderboard.

    The percentage is measured over the gap between the previous milestone
    (0 before Top 100) and the target one.
    """
    steps = milestones(rating)
    for index, milestone in enumerate(steps):
        if rating.place > milestone.limit:
            previous_top = steps[index - 1].top if index > 0 else 0
            rest = remaining(milestone.top, solved)
            total = milestone.top - previous_top + 1

            percentage = round_half_up((total - rest) / total * 100) if total > 0 else 0
            return TopResult(
                message=f"{rest} problems away from {milestone.title}",
                percentage=percentage,
                rest=rest,
            )

    return TopResult(message=TOP_1_MESSAGE, percentage=100, rest=0)


def find_award_with_max_members(award_blocks: Iterable[AwardBlockData]) -> Optional[AwardData]:
    """Unfinished award held by the most members, or None when every award is won."""
    best: Optional[AwardData] = None
    best_members = 0

    for block in award_blocks:
        for award in block.awards:
            if award.is_completed:
                continue
            members = count_from_text(award.members)
            if best is None or members > best_members:
                best, best_members = award, members

    return best


def level_rest(progress: ProgressData) -> int:
    """Problems left to the next level, read from the progress page text."""
    return first_integer(progress.to_the_next, PROBLEMS_PER_LEVEL)


def level_percentage(progress: ProgressData) -> int:
    return (PROBLEMS_PER_LEVEL - level_rest(progress)) * 4
