"""Query functions for the task list view: filtering, sorting and stats.

These are pure functions over a task sequence; they never mutate or cache.
"Now" is read on each call because overdue status changes as time passes.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from studyplan_cli.models import FILTER_ALL, Task, TaskFilters, TaskStats

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}


def matches_search(task: Task, search_term: str) -> bool:
    """Case-insensitive substring match on title, description, subject and tags."""
    term = search_term.casefold()
    if not term:
        return True
    fields = (task.title, task.description, task.subject)
    if any(term in field.casefold() for field in fields):
        return True
    return any(term in tag.casefold() for tag in task.tags)


def _sort_key(task: Task) -> tuple[int, int]:
    # Dated tasks first by date, then undated by descending priority
    if task.due_date is not None:
        return (0, task.due_date.toordinal())
    return (1, -PRIORITY_RANK.get(task.priority, 0))


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Sort tasks for display.

    Tasks with a due date come first, ascending by date. Tasks without one
    follow, highest priority first. Remaining ties keep their input order.
    """
    return sorted(tasks, key=_sort_key)


def filter_tasks(tasks: Iterable[Task], filters: TaskFilters) -> list[Task]:
    """Apply search, status and priority filters, then sort.

    Args:
        tasks: All tasks
        filters: Filter criteria; "all" disables a status/priority filter

    Returns:
        Tasks satisfying every filter, in display order
    """
    matched = [
        task
        for task in tasks
        if matches_search(task, filters.search_term)
        and (filters.status_filter == FILTER_ALL or task.status == filters.status_filter)
        and (
            filters.priority_filter == FILTER_ALL
            or task.priority == filters.priority_filter
        )
    ]
    return sort_tasks(matched)


def is_overdue(task: Task, now: datetime | None = None) -> bool:
    """Check whether a task is past due.

    A task due on a given day becomes overdue once that calendar day has
    ended in local time. Completed tasks are never overdue.

    Args:
        task: Task to check
        now: Reference moment (defaults to the current local time)

    Returns:
        True if the task is overdue
    """
    if task.due_date is None or task.status == "completed":
        return False
    today = (now or datetime.now()).date()
    return task.due_date < today


def compute_stats(tasks: Iterable[Task], now: datetime | None = None) -> TaskStats:
    """Compute the total/completed/in-progress/overdue counters."""
    now = now or datetime.now()
    stats = TaskStats()
    for task in tasks:
        stats.total += 1
        if task.status == "completed":
            stats.completed += 1
        elif task.status == "in-progress":
            stats.in_progress += 1
        if is_overdue(task, now):
            stats.overdue += 1
    return stats
