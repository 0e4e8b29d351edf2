"""Profile section."""

from bs4 import Tag

from domain.models import AccountData, ProgressData
from infrastructure.parsers.urls import EulerURLs

from .common import create_row, create_section_header, new_tag, section_header_tag


def generate_profile_html(
    account_data: AccountData, progress_data: ProgressData, compact: bool = False
) -> Tag:
    """Profile table; the compact form keeps only alias, level and solved count."""
    container = new_tag("div", class_="euler-profile")
    container.append(create_section_header("Profile", section_header_tag(compact)))

    rows = [
        ("Alias", account_data.alias),
        ("Level", progress_data.level),
        ("Solved", progress_data.solved),
    ]
    if not compact:
        rows = [
            ("Account", account_data.account),
            ("Alias", account_data.alias),
            ("Location", account_data.location),
            ("Language", account_data.language),
            ("Level", progress_data.level),
            ("Solved", progress_data.solved),
        ]

    table = new_tag("table", class_="profile-table")
    body = new_tag("tbody")
    for label, value in rows:
        body.append(create_row(label, str(value)))
    table.append(body)
    container.append(table)

    if not compact:
        container.append(generate_image_html(account_data.account))

    return container


def generate_image_html(account: str) -> Tag:
    return new_tag(
        "img",
        src=EulerURLs.build_profile_image_url(account),
        alt=f"Profile {account}",
        title=account,
    )
