"""
CSS selectors for every scraped page.

The site's markup is an external contract: when it changes, only this module
should need editing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountPage:
    username: str = 'input[name="profile_username"]'
    alias: str = 'input[name="profile_alias"]'
    location: str = 'select[name="profile_location"]'
    language: str = 'select[name="profile_language"]'


@dataclass(frozen=True)
class ProgressPage:
    level: str = "h3#level_text"
    progress: str = "div#progress_page > h3"
    to_the_next: str = "#progress_page > .progress_bar_with_threshold > span"


@dataclass(frozen=True)
class RatingPage:
    current_rank: str = "#id_current > td.rank_column"
    # rows may sit directly under the table; lxml adds no implied tbody
    rows: str = "#main_table tr"
    solved_cell: str = ".solved_column"

    def solved_at_row(self, row: int) -> str:
        """Selector of the solved cell in the ``row``-th table row (the header is row 1)."""
        return f"{self.rows}:nth-of-type({row}) > {self.solved_cell}"


@dataclass(frozen=True)
class LevelsPage:
    tiles: str = "#tile_grid > .tile_box"
    level: str = "a"
    members: str = ".small_notice"


@dataclass(frozen=True)
class MyAwardsPage:
    blocks: str = "div#awards_section > div"
    block_name: str = "h3"
    award_box: str = "div.award_box"
    award_name: str = "span.tooltiptext_narrow > div:first-of-type"
    award_link: str = "a"
    tooltip: str = "span.tooltiptext_narrow"


@dataclass(frozen=True)
class AwardsPage:
    tiles: str = "div#tile_grid > div.tile_box"


@dataclass(frozen=True)
class FriendsPage:
    rows: str = "#friends_table tr"
    rank: str = "td.rank_column"
    username: str = "td.username_column a"
    solved: str = "td.solved_column"
    level: str = "td.level_column"
    awards: str = "td.awards_column"


# Table row holding the last member of each milestone; row 1 is the header.
MILESTONE_ROWS = {
    "top100": 101,
    "top50": 51,
    "top25": 26,
    "top10": 11,
    "top5": 6,
    "top1": 2,
}

ACCOUNT_PAGE = AccountPage()
PROGRESS_PAGE = ProgressPage()
RATING_PAGE = RatingPage()
LEVELS_PAGE = LevelsPage()
MY_AWARDS_PAGE = MyAwardsPage()
AWARDS_PAGE = AwardsPage()
FRIENDS_PAGE = FriendsPage()
