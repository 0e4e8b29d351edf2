"""Renderers turning scraped records into HTML fragments."""

from .common import NOT_IN_TOP_100, create_progress_bar, create_section_header
from .page import (
    REFRESH_HINT,
    render_error,
    render_profile_image_block,
    render_refresh_hint,
    render_snapshot,
)

__all__ = [
    "NOT_IN_TOP_100",
    "REFRESH_HINT",
    "create_progress_bar",
    "create_section_header",
    "render_error",
    "render_profile_image_block",
    "render_refresh_hint",
    "render_snapshot",
]
