"""Progress section: overall progress and current places."""

from bs4 import Tag

from domain.models import CacheData, RatingData
from infrastructure.parsers.urls import EulerURLs

from .common import (
    create_link,
    create_progress_bar,
    create_row,
    create_section_header,
    create_table,
    new_tag,
    place_text,
    section_header_tag,
)


def place_percentage(rating: RatingData) -> int:
    """Bar value for a leaderboard place: 0 outside the Top 100, ``100 - place`` inside."""
    return 100 - rating.place if rating.in_top_100 else 0


def generate_progress_table_html(snapshot: CacheData, compact: bool = False) -> Tag:
    account = snapshot.account_data
    progress = snapshot.progress_data

    container = new_tag("div", class_="euler-progress")
    container.append(create_section_header("Progress", section_header_tag(compact)))
    if not compact:
        container.append(create_progress_bar(progress.percentage))

    headers = ["Competition", "Status"] if compact else ["Competition", "Status", "Progress bar"]
    table, body = create_table(headers)

    def add_row(label, status, percentage=None):
        if compact:
            body.append(create_row(label, status))
        else:
            bar = create_progress_bar(percentage) if percentage is not None else None
            body.append(create_row(label, status, bar))

    add_row("Progress", progress.progress, progress.percentage)
    add_row(create_link(EulerURLs.EULERIANS, "Place in Eulerians"), snapshot.eulerians_place)
    add_row(
        create_link(snapshot.location_url, f"Place in {account.location}"),
        place_text(snapshot.location_rating),
        place_percentage(snapshot.location_rating),
    )
    add_row(
        create_link(snapshot.language_url, f"Place in {account.language}"),
        place_text(snapshot.language_rating),
        place_percentage(snapshot.language_rating),
    )

    container.append(table)
    return container
