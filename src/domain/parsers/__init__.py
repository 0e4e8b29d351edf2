"""Parsers for text that does not come from HTML pages."""

from .numbers import (
    calculate_percentage,
    count_from_text,
    extract_percentage,
    extract_solved_count,
    string_to_number,
)
from .source_parser import extract_sources

__all__ = [
    "calculate_percentage",
    "count_from_text",
    "extract_percentage",
    "extract_solved_count",
    "extract_sources",
    "string_to_number",
]
