"""Small helpers shared by the page parsers."""

from typing import Optional

from bs4 import BeautifulSoup, Tag


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def select_text(root: Tag, selector: str, default: str = "", *, strip: bool = False) -> str:
    """Text content of the first match, or ``default`` when there is no match or no text."""
    element = root.select_one(selector)
    if element is None:
        return default

    text = element.get_text()
    if strip:
        text = text.strip()
    return text or default


def input_value(root: Tag, selector: str) -> str:
    """Value of a form control: ``value`` of an input, or the selected option of a select."""
    element = root.select_one(selector)
    if element is None:
        return ""

    if element.name != "select":
        return _attr(element, "value")

    option: Optional[Tag] = element.find("option", selected=True) or element.find("option")
    if option is None:
        return ""
    if option.has_attr("value"):
        return _attr(option, "value")
    return option.get_text().strip()


def _attr(element: Tag, name: str) -> str:
    value = element.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value or ""
