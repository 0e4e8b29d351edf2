"""Parsers for leaderboard and level pages."""

from loguru import logger

from domain.models import LevelData, RatingData
from domain.models.rating import NOT_RANKED
from domain.parsers.numbers import string_to_number

from .html_utils import make_soup, select_text
from .page_models import LEVELS_PAGE, MILESTONE_ROWS, RATING_PAGE


def parse_rating_data(html: str) -> RatingData:
    """
    Read the current place and the solved counts at the milestone rows.

    Missing cells and cells without digits become ``NOT_RANKED``.
    """
    soup = make_soup(html)
    fallback = str(NOT_RANKED)

    place = string_to_number(select_text(soup, RATING_PAGE.current_rank, fallback, strip=True))
    thresholds = {
        name: string_to_number(select_text(soup, RATING_PAGE.solved_at_row(row), fallback, strip=True))
        for name, row in MILESTONE_ROWS.items()
    }

    rating = RatingData(place=place, **thresholds)
    logger.debug(f"Parsed rating data: place={rating.place}")
    return rating


def parse_level_data(html: str) -> list[LevelData]:
    """Read the level tiles in page order."""
    soup = make_soup(html)

    levels = [
        LevelData(
            level=select_text(tile, LEVELS_PAGE.level, strip=True),
            members=select_text(tile, LEVELS_PAGE.members, strip=True),
        )
        for tile in soup.select(LEVELS_PAGE.tiles)
    ]

    logger.debug(f"Parsed {len(levels)} level(s)")
    return levels
