"""Parsers for extracting records from Project Euler pages."""

from .awards_parser import parse_awards_data
from .friends_parser import parse_friends
from .interfaces import PageFetcherProtocol
from .profile_parser import (
    NOT_IN_EULERIANS,
    parse_account_data,
    parse_eulerians_data,
    parse_progress_data,
)
from .rating_parser import parse_level_data, parse_rating_data
from .urls import EulerURLs

__all__ = [
    "NOT_IN_EULERIANS",
    "EulerURLs",
    "PageFetcherProtocol",
    "parse_account_data",
    "parse_awards_data",
    "parse_eulerians_data",
    "parse_friends",
    "parse_level_data",
    "parse_progress_data",
    "parse_rating_data",
]
