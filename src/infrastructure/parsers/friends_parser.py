"""Parser for the friends page."""

from loguru import logger

from domain.models import FriendData
from domain.parsers.numbers import string_to_number

from .html_utils import make_soup, select_text
from .page_models import FRIENDS_PAGE


def parse_friends(html: str) -> list[FriendData]:
    """Read every friends table row after the header."""
    soup = make_soup(html)

    friends = [
        FriendData(
            rank=select_text(row, FRIENDS_PAGE.rank),
            username=select_text(row, FRIENDS_PAGE.username),
            solved=string_to_number(select_text(row, FRIENDS_PAGE.solved, "0")),
            level=string_to_number(select_text(row, FRIENDS_PAGE.level, "0")),
            awards=string_to_number(select_text(row, FRIENDS_PAGE.awards, "0")),
        )
        for row in soup.select(FRIENDS_PAGE.rows)[1:]
    ]

    logger.debug(f"Parsed {len(friends)} friend row(s)")
    return friends
