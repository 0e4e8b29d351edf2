"""Awards section."""

from typing import Sequence

from bs4 import Tag

from domain.models import AwardBlockData, AwardData

from .common import (
    create_link,
    create_progress_bar,
    create_row,
    create_section_header,
    create_table,
    new_tag,
    section_header_tag,
)

COMPACT_AWARD_ROWS = 3


def _award_row(award: AwardData, compact: bool) -> Tag:
    link = create_link(award.link, award.award)
    if compact:
        return create_row(link, award.progress, create_progress_bar(award.percentage))
    return create_row(
        link,
        award.description,
        award.members,
        award.progress,
        create_progress_bar(award.percentage),
    )


def _award_block(block: AwardBlockData, compact: bool) -> Tag:
    container = new_tag("div", class_="award-block")

    completed = block.completed_count
    total = len(block.awards)
    uncompleted = block.uncompleted

    if compact:
        container.append(
            create_section_header(f"{block.name}: won {completed} out of {total}", "h5")
        )
        headers = ["Award", "Progress", "Progress bar"]
        uncompleted = uncompleted[:COMPACT_AWARD_ROWS]
    else:
        container.append(create_section_header(block.name, "h3"))
        container.append(create_section_header(f"Status: Won {completed} out of {total}", "h4"))
        container.append(
            create_section_header(f"Uncompleted awards: {total - completed}", "h4")
        )
        headers = ["Award", "Description", "Members", "Progress", "Progress bar"]

    table, body = create_table(headers)
    for award in uncompleted:
        body.append(_award_row(award, compact))
    container.append(table)

    return container


def generate_awards_table_html(awards_data: Sequence[AwardBlockData], compact: bool = False) -> Tag:
    container = new_tag("div", class_="euler-awards")
    container.append(create_section_header("Awards", section_header_tag(compact)))

    for block in awards_data:
        container.append(_award_block(block, compact))

    return container
