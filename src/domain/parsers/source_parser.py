"""Parser for the text body of a stats block."""

from loguru import logger

from domain.models.tasks import PersonalTask, Source

from .numbers import extract_percentage


def extract_sources(source: str) -> Source:
    """
    Parse personal tasks from block text.

    Each non-blank line has the form ``label; percentage``. The percentage may be
    written with or without a ``%`` sign; anything unreadable counts as 0.
    """
    tasks = []
    for line in (source or "").splitlines():
        if not line.strip():
            continue

        label, _, percentage = line.partition(";")
        tasks.append(
            PersonalTask(
                task=label.strip(),
                percentage=extract_percentage(percentage.strip(), require_sign=False),
            )
        )

    logger.debug(f"Parsed {len(tasks)} personal task(s)")
    return Source(tasks=tuple(tasks))
