"""Helpers for pulling numbers out of page text."""

import math
import re

from domain.models.rating import NOT_RANKED

SOLVED_PATTERN = re.compile(r"Solved\s+(\d+)\s+out")
PERCENTAGE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)%")
PLAIN_NUMBER_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")
FRACTION_PATTERN = re.compile(r"(\d+)\s*/\s*(\d+)")
FIRST_INTEGER_PATTERN = re.compile(r"(\d+)")


def string_to_number(text: str) -> int:
    """Drop every non-digit character and parse the rest, ``NOT_RANKED`` if nothing is left."""
    digits = re.sub(r"\D", "", text or "")
    return int(digits) if digits else NOT_RANKED


def count_from_text(text: str) -> int:
    """Like ``string_to_number`` but treats text without digits as zero."""
    digits = re.sub(r"\D", "", text or "")
    return int(digits) if digits else 0


def extract_solved_count(text: str) -> int:
    """Extract N from a "Solved N out of M problems" sentence."""
    match = SOLVED_PATTERN.search(text or "")
    return int(match.group(1)) if match else 0


def extract_percentage(text: str, *, require_sign: bool = True) -> float:
    """
    Extract a percentage value such as ``42.5%``.

    Args:
        text: Text containing the percentage
        require_sign: Whether the number must be followed by ``%``

    Returns:
        The parsed value, or 0 when nothing matches
    """
    pattern = PERCENTAGE_PATTERN if require_sign else PLAIN_NUMBER_PATTERN
    match = pattern.search(text or "")
    return _as_number(float(match.group(1))) if match else 0


def calculate_percentage(text: str) -> float:
    """Percentage of an "x / y" fragment, rounded to two decimals."""
    match = FRACTION_PATTERN.search(text or "")
    if match:
        done, total = int(match.group(1)), int(match.group(2))
        if total > 0:
            return _as_number(round(done / total * 100, 2))
    return 0


def first_integer(text: str, default: int) -> int:
    match = FIRST_INTEGER_PATTERN.search(text or "")
    return int(match.group(1)) if match else default


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _as_number(value: float) -> float:
    # 40.0 -> 40 so that rendered text matches the page
    return int(value) if value.is_integer() else value
