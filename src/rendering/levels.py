"""Level progress section."""

from typing import Sequence

from bs4 import Tag

from domain.models import LevelData, ProgressData
from domain.parsers.numbers import count_from_text, string_to_number
from domain.ranking import PROBLEMS_PER_LEVEL
from infrastructure.parsers.urls import EulerURLs

from .common import (
    create_link,
    create_row,
    create_section_header,
    create_table,
    new_tag,
    section_header_tag,
)

COMPACT_LEVEL_ROWS = 3


def _level_row(level_data: LevelData, progress_data: ProgressData) -> Tag:
    row_level = string_to_number(level_data.level)
    need_for_level = row_level * PROBLEMS_PER_LEVEL
    left = max(0, need_for_level - progress_data.solved)

    return create_row(
        create_link(EulerURLs.build_level_url(row_level), level_data.level),
        need_for_level,
        left,
        level_data.members,
    )


def calculate_total_members(levels: Sequence[LevelData]) -> int:
    return sum(count_from_text(level.members) for level in levels)


def generate_levels_table_html(
    progress_data: ProgressData, levels: Sequence[LevelData], compact: bool = False
) -> Tag:
    """
    Levels from the member's current one upwards.

    Shows "No levels available" when the level list is empty or the member is
    already past its last entry.
    """
    level = string_to_number(progress_data.level)
    container = new_tag("div", class_="euler-levels")
    header_tag = section_header_tag(compact)

    if not levels or level >= len(levels):
        container.append(create_section_header("No levels available", header_tag))
        return container

    upcoming = list(levels[max(level - 1, 0) :])
    container.append(create_section_header("Level progress", header_tag))

    if compact:
        container.append(
            create_section_header(
                f"Current level: {progress_data.level}, solved problems: {progress_data.solved}",
                "h5",
            )
        )
        upcoming = upcoming[:COMPACT_LEVEL_ROWS]
    else:
        container.append(create_section_header(f"Current level: {progress_data.level}", "h4"))
        container.append(create_section_header(f"Solved problems: {progress_data.solved}", "h5"))
        total_members = calculate_total_members(upcoming)
        container.append(
            create_section_header(
                f"Status: {total_members} members have made it this far.", "h5"
            )
        )

    table, body = create_table(["Level", "Solve", "Remaining", "Members"])
    for level_data in upcoming:
        body.append(_level_row(level_data, progress_data))

    container.append(table)
    return container
