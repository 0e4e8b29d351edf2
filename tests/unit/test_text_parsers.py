"""Unit tests for number extraction and block source parsing."""

import pytest

from domain.models import PersonalTask, Source
from domain.models.rating import NOT_RANKED
from domain.parsers import (
    calculate_percentage,
    count_from_text,
    extract_percentage,
    extract_solved_count,
    extract_sources,
    string_to_number,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1,234th", 1234),
        ("  37 ", 37),
        ("Level 12", 12),
        ("", NOT_RANKED),
        ("n/a", NOT_RANKED),
    ],
)
def test_string_to_number(text, expected):
    assert string_to_number(text) == expected


def test_count_from_text_treats_missing_digits_as_zero():
    assert count_from_text("1,204 members") == 1204
    assert count_from_text("members") == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Solved 87 out of 925 problems (9.4%)", 87),
        ("Solved  120  out of 925", 120),
        ("You have not solved anything", 0),
        ("", 0),
    ],
)
def test_extract_solved_count(text, expected):
    assert extract_solved_count(text) == expected


def test_extract_percentage():
    assert extract_percentage("Solved 87 out of 925 problems (9.4%)") == 9.4
    assert extract_percentage("50%") == 50
    assert extract_percentage("no percentage here") == 0
    assert extract_percentage("40") == 0
    assert extract_percentage("40", require_sign=False) == 40


@pytest.mark.parametrize(
    "text, expected",
    [
        ("4 / 10", 40),
        ("5/12", 41.67),
        ("0 / 0", 0),
        ("", 0),
    ],
)
def test_calculate_percentage(text, expected):
    assert calculate_percentage(text) == expected


class TestExtractSources:
    """Tests for the personal task lines of a stats block."""

    def test_parses_tasks(self):
        source = extract_sources("Finish set; 40\nReview; 75")

        assert source.tasks == (
            PersonalTask(task="Finish set", percentage=40),
            PersonalTask(task="Review", percentage=75),
        )

    def test_skips_blank_lines_and_accepts_percent_sign(self):
        source = extract_sources("\n  \nRead paper; 42.5%\n\n")

        assert source.tasks == (PersonalTask(task="Read paper", percentage=42.5),)

    def test_missing_percentage_is_zero(self):
        source = extract_sources("Just a label\nOther; soon")

        assert [task.percentage for task in source.tasks] == [0, 0]
        assert [task.task for task in source.tasks] == ["Just a label", "Other"]

    def test_empty_source(self):
        assert extract_sources("") == Source()
