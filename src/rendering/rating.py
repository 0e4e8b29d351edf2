"""Leaderboard sections for the location and language ratings."""

from bs4 import Tag

from domain.models import RatingData
from domain.ranking import active_milestone, milestones, remaining

from .common import (
    create_link,
    create_row,
    create_section_header,
    create_table,
    new_tag,
    place_text,
    section_header_tag,
)


def _milestone_row(title: str, top: int, solved: int) -> Tag:
    rest = remaining(top, solved)
    return create_row(title, top, f"{rest} problems away from {title}")


def generate_rating_table_html(
    url: str, title: str, solved: int, rating: RatingData, compact: bool = False
) -> Tag:
    """
    Rating section for one leaderboard.

    The full form lists every milestone the member has not passed yet
    (strictly behind Top 100/50/25/10/5, and Top 1 for any ranked place).
    The compact form shows only the milestone the member is chasing now.
    """
    container = new_tag("div", class_="euler-rating")

    header = new_tag(section_header_tag(compact))
    header.append("Progress in ")
    header.append(create_link(url, f"the {title}'s rating"))
    container.append(header)

    if compact:
        container.append(
            create_section_header(
                f"Current place: {place_text(rating)}, solved problems: {solved}", "h5"
            )
        )
    else:
        container.append(create_section_header(f"Current place: {place_text(rating)}", "h4"))
        container.append(create_section_header(f"Solved problems: {solved}", "h5"))

    table, body = create_table(["Competition", "Solved", "Remaining"])

    if compact:
        target = active_milestone(rating)
        if target is not None:
            body.append(_milestone_row(target.title, target.top, solved))
    else:
        for milestone in milestones(rating):
            shown = rating.place >= 1 if milestone.limit == 1 else rating.place > milestone.limit
            if shown:
                body.append(_milestone_row(milestone.title, milestone.top, solved))

    container.append(table)
    return container
