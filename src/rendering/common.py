"""Building blocks shared by every section renderer."""

from typing import Iterable, Optional, Union

from bs4 import BeautifulSoup, Tag

from domain.models import RatingData

NOT_IN_TOP_100 = "You are not in the Top 100"

Cell = Union[str, int, float, Tag, None]

_FACTORY = BeautifulSoup("", "html.parser")


def new_tag(name: str, text: Optional[str] = None, **attrs: str) -> Tag:
    """Create a detached tag; ``class_`` maps to the ``class`` attribute."""
    if "class_" in attrs:
        attrs["class"] = attrs.pop("class_")
    tag = _FACTORY.new_tag(name, attrs=attrs)
    if text is not None:
        tag.string = text
    return tag


def format_number(value: Union[int, float]) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def create_progress_bar(percentage: Union[int, float]) -> Tag:
    """Progress bar clamped to the 0-100 range."""
    clamped = min(100, max(0, percentage))
    label = f"{format_number(clamped)}%"

    container = new_tag("div", class_="progress-container")
    container.append(new_tag("span", class_="progress-bar", style=f"width: {label};"))
    container.append(new_tag("span", label, class_="progress-text"))
    return container


def create_section_header(title: str, tag_name: str = "h2") -> Tag:
    return new_tag(tag_name, title)


def section_header_tag(compact: bool) -> str:
    return "h4" if compact else "h2"


def create_link(href: str, text: str) -> Tag:
    return new_tag("a", text, href=href)


def create_table(headers: Iterable[str], class_: Optional[str] = None) -> tuple[Tag, Tag]:
    """Table with a header row; returns the table and its body for appending rows."""
    table = new_tag("table", class_=class_) if class_ else new_tag("table")
    body = new_tag("tbody")

    header_row = new_tag("tr")
    for header in headers:
        header_row.append(new_tag("th", header))
    body.append(header_row)

    table.append(body)
    return table, body


def create_row(*cells: Cell, **attrs: str) -> Tag:
    """Table row; strings and numbers become cell text, tags are nested, None leaves a cell empty."""
    row = new_tag("tr", **attrs)
    for cell in cells:
        td = new_tag("td")
        if isinstance(cell, Tag):
            td.append(cell)
        elif cell is not None:
            td.string = format_number(cell) if isinstance(cell, (int, float)) else cell
        row.append(td)
    return row


def place_text(rating: RatingData) -> str:
    return str(rating.place) if rating.in_top_100 else NOT_IN_TOP_100
