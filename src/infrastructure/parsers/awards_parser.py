"""Parser joining the member's award progress with global award statistics."""

from bs4 import Tag
from loguru import logger

from domain.models import AwardBlockData, AwardData
from domain.parsers.numbers import calculate_percentage

from .html_utils import make_soup, select_text
from .page_models import AWARDS_PAGE, MY_AWARDS_PAGE
from .urls import EulerURLs

DEFAULT_MEMBERS = "0 members"
PROGRESS_MARKER = "Progress:"
COMPLETED_MARKER = "Completed"


def parse_awards_data(my_awards_html: str, awards_html: str) -> list[AwardBlockData]:
    """
    Build award blocks from the member's awards page.

    Member counts come from the global awards page: the tile whose text starts
    with the award name supplies its last text line.
    """
    my_awards_soup = make_soup(my_awards_html)
    awards_soup = make_soup(awards_html)

    members_texts = [
        tile.get_text("\n", strip=True) for tile in awards_soup.select(AWARDS_PAGE.tiles)
    ]

    blocks = [
        AwardBlockData(
            name=select_text(block, MY_AWARDS_PAGE.block_name),
            awards=tuple(
                _parse_award(box, members_texts)
                for box in block.select(MY_AWARDS_PAGE.award_box)
            ),
        )
        for block in my_awards_soup.select(MY_AWARDS_PAGE.blocks)
    ]

    logger.debug(
        f"Parsed {len(blocks)} award block(s) with {sum(len(b.awards) for b in blocks)} award(s)"
    )
    return blocks


def _parse_award(box: Tag, members_texts: list[str]) -> AwardData:
    award = select_text(box, MY_AWARDS_PAGE.award_name)

    link_element = box.select_one(MY_AWARDS_PAGE.award_link)
    href = link_element.get("href", "") if link_element is not None else ""

    tooltip = select_text(box, MY_AWARDS_PAGE.tooltip).strip()
    head, _, tail = tooltip.partition(PROGRESS_MARKER)
    description = head.replace(award, "", 1).replace(COMPLETED_MARKER, "", 1).strip()
    progress = tail.strip()

    return AwardData(
        award=award,
        link=EulerURLs.build_award_url(href),
        description=description,
        is_completed=tooltip.endswith(COMPLETED_MARKER),
        progress=progress,
        percentage=calculate_percentage(progress),
        members=_find_members(award, members_texts),
    )


def _find_members(award: str, members_texts: list[str]) -> str:
    source = next((text for text in members_texts if text.startswith(award)), "")
    return source.split("\n")[-1] if source else DEFAULT_MEMBERS
