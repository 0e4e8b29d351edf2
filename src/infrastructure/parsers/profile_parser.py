"""Parsers for the account, progress and Eulerians pages."""

from loguru import logger

from domain.models import AccountData, ProgressData
from domain.parsers.numbers import extract_percentage, extract_solved_count

from .html_utils import input_value, make_soup, select_text
from .page_models import ACCOUNT_PAGE, PROGRESS_PAGE, RATING_PAGE

NOT_IN_EULERIANS = "You are not in Eulerians' rating"


def parse_account_data(html: str) -> AccountData:
    """Read the four profile form fields of the account page."""
    soup = make_soup(html)

    account_data = AccountData(
        account=input_value(soup, ACCOUNT_PAGE.username),
        alias=input_value(soup, ACCOUNT_PAGE.alias),
        location=input_value(soup, ACCOUNT_PAGE.location),
        language=input_value(soup, ACCOUNT_PAGE.language),
    )

    logger.debug(f"Parsed account data for: {account_data.account or '<unknown>'}")
    return account_data


def parse_progress_data(html: str) -> ProgressData:
    """
    Read the level label, the "Solved N out of M" sentence and the distance
    to the next level from the progress page.
    """
    soup = make_soup(html)

    progress = select_text(soup, PROGRESS_PAGE.progress)
    progress_data = ProgressData(
        level=select_text(soup, PROGRESS_PAGE.level),
        solved=extract_solved_count(progress),
        percentage=extract_percentage(progress),
        progress=progress,
        to_the_next=select_text(soup, PROGRESS_PAGE.to_the_next),
    )

    logger.debug(f"Parsed progress data: solved={progress_data.solved}")
    return progress_data


def parse_eulerians_data(html: str) -> str:
    """Current place in the Eulerians rating, as displayed on the page."""
    soup = make_soup(html)
    return select_text(soup, RATING_PAGE.current_rank, NOT_IN_EULERIANS, strip=True)
