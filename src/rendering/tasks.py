"""Tasks section: personal tasks followed by the closest achievable goals."""

from dataclasses import dataclass

from bs4 import Tag

from domain.models import CacheData, Source
from domain.ranking import determine_top, find_award_with_max_members, level_percentage, level_rest

from .common import (
    create_link,
    create_progress_bar,
    create_section_header,
    new_tag,
    section_header_tag,
)


@dataclass(frozen=True)
class GoalTask:
    """A generated task and the problems left to complete it."""

    text: str
    percentage: int
    rest: int


def build_goal_tasks(snapshot: CacheData) -> list[GoalTask]:
    """Level, location and language goals, soonest achievable first."""
    progress = snapshot.progress_data
    account = snapshot.account_data

    location = determine_top(progress.solved, snapshot.location_rating)
    language = determine_top(progress.solved, snapshot.language_rating)

    goals = [
        GoalTask(
            text=f"{progress.level}: {progress.to_the_next}. ",
            percentage=level_percentage(progress),
            rest=level_rest(progress),
        ),
        GoalTask(f"{account.location}: {location.message}. ", location.percentage, location.rest),
        GoalTask(f"{account.language}: {language.message}. ", language.percentage, language.rest),
    ]
    return sorted(goals, key=lambda goal: goal.rest)


def generate_tasks_table_html(snapshot: CacheData, source: Source, compact: bool = False) -> Tag:
    container = new_tag("div", class_="euler-tasks")
    container.append(create_section_header("Tasks", section_header_tag(compact)))

    tasks_list = new_tag("ul", class_="tasks-list")

    for task in source.tasks:
        item = new_tag("li")
        item.append(task.task)
        item.append(create_progress_bar(task.percentage))
        tasks_list.append(item)

    for goal in build_goal_tasks(snapshot):
        item = new_tag("li")
        item.append(goal.text)
        item.append(create_progress_bar(goal.percentage))
        tasks_list.append(item)

    award = find_award_with_max_members(snapshot.awards_data)
    if award is not None:
        item = new_tag("li")
        item.append("Most unresolved award: ")
        item.append(create_link(award.link, award.award))
        item.append(f" ({award.description}) by {award.members}. ")
        item.append(create_progress_bar(award.percentage))
        tasks_list.append(item)

    container.append(tasks_list)
    return container
