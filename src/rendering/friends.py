"""Friends section."""

from typing import Sequence

from bs4 import Tag

from domain.models import AccountData, FriendData
from infrastructure.parsers.urls import EulerURLs

from .common import (
    create_link,
    create_row,
    create_section_header,
    create_table,
    new_tag,
    section_header_tag,
)

COMPACT_FRIEND_ROWS = 3
OWN_ROW_ID = "your-account"


def _compare(value: int, mine: int, is_me: bool) -> str:
    if not is_me and value > mine:
        return f"{value} (+{value - mine})"
    return str(value)


def _friend_row(friend: FriendData, me: FriendData, account_data: AccountData) -> Tag:
    is_me = friend.username == account_data.alias
    attrs = {"id": OWN_ROW_ID} if is_me else {}

    return create_row(
        friend.rank,
        create_link(EulerURLs.build_member_progress_url(friend.username), friend.username),
        _compare(friend.solved, me.solved, is_me),
        _compare(friend.level, me.level, is_me),
        _compare(friend.awards, me.awards, is_me),
        **attrs,
    )


def find_own_row(friends: Sequence[FriendData], account_data: AccountData) -> FriendData:
    """The member's own row, or an empty row under their alias when they are not listed."""
    return next(
        (friend for friend in friends if friend.username == account_data.alias),
        FriendData(rank="-", username=account_data.alias),
    )


def generate_friends_html(
    friends: Sequence[FriendData], account_data: AccountData, compact: bool = False
) -> Tag:
    """Friends table; rows ahead of the member show by how much. Compact keeps the top 3."""
    container = new_tag("div", class_="euler-friends")
    container.append(create_section_header("Friends", section_header_tag(compact)))

    me = find_own_row(friends, account_data)
    rows = list(friends[:COMPACT_FRIEND_ROWS]) if compact else list(friends)

    table, body = create_table(["Rank", "Username", "Solved", "Level", "Awards"])
    for friend in rows:
        body.append(_friend_row(friend, me, account_data))

    container.append(table)
    return container
