"""Assembly of the full stats fragment and the failure fragments."""

from bs4 import Tag
from loguru import logger

from domain.models import CacheData, Source

from .awards import generate_awards_table_html
from .common import new_tag
from .friends import generate_friends_html
from .levels import generate_levels_table_html
from .profile import generate_image_html, generate_profile_html
from .progress import generate_progress_table_html
from .rating import generate_rating_table_html
from .tasks import generate_tasks_table_html

REFRESH_HINT = "Error fetching progress. Please refresh your cookies!"
MISSING_ACCOUNT = 'The "account=" parameter is not set or is set incorrectly!'


def render_snapshot(snapshot: CacheData, source: Source, compact: bool = False) -> Tag:
    """Render every section of a snapshot, then the task list."""
    account = snapshot.account_data
    progress = snapshot.progress_data

    container = new_tag("div", class_="euler-stats-compact" if compact else "euler-stats")
    sections = [
        generate_profile_html(account, progress, compact),
        generate_progress_table_html(snapshot, compact),
        generate_rating_table_html(
            snapshot.location_url, account.location, progress.solved, snapshot.location_rating, compact
        ),
        generate_rating_table_html(
            snapshot.language_url, account.language, progress.solved, snapshot.language_rating, compact
        ),
        generate_levels_table_html(progress, snapshot.level_data, compact),
        generate_awards_table_html(snapshot.awards_data, compact),
        generate_friends_html(snapshot.friends, account, compact),
        generate_tasks_table_html(snapshot, source, compact),
    ]
    for section in sections:
        container.append(section)

    logger.debug(f"Rendered snapshot for {account.account} (compact={compact})")
    return container


def render_error(message: str) -> Tag:
    return new_tag("div", message, class_="euler-stats-error")


def render_refresh_hint() -> Tag:
    return render_error(REFRESH_HINT)


def render_profile_image_block(source: str) -> Tag:
    """Profile image for a block containing an ``account=<name>`` line."""
    line = next(
        (line for line in (source or "").splitlines() if line.startswith("account=")),
        None,
    )
    account = line.split("=", 1)[1].strip() if line else ""
    if not account:
        return render_error(MISSING_ACCOUNT)

    return generate_image_html(account)
