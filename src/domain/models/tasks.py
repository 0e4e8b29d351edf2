"""Value objects for user-authored tasks."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PersonalTask:
    """A task label with a completion percentage, written by the user."""

    task: str
    percentage: float = 0


@dataclass(frozen=True)
class Source:
    """Parsed content of a stats block."""

    tasks: tuple[PersonalTask, ...] = field(default_factory=tuple)
