# src/taskboard/tasks/task_filters.py

"""
Visible-list derivation.

Pure functions of (tasks, filters, now): no hidden state, so callers may cache the
result but never have to.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from .task_models import ALL, DueDateFilter, StatusFilter, Task, TaskFilters


def _day(value: date | datetime) -> date:
    # datetime is a date subclass; reduce it to its calendar day.
    if isinstance(value, datetime):
        return value.date()
    return value


def due_bucket(task: Task, now: date | datetime) -> DueDateFilter:
    """
    Bucket for a single task relative to the day of `now`.

    A due date on today's day is only "today": overdue means strictly before the
    start of today, upcoming strictly after the end of today.
    """
    if task.due_date is None:
        return DueDateFilter.NO_DUE_DATE

    due = _day(task.due_date)
    today = _day(now)
    if due < today:
        return DueDateFilter.OVERDUE
    if due > today:
        return DueDateFilter.UPCOMING
    return DueDateFilter.TODAY


def matches(task: Task, filters: TaskFilters, now: date | datetime) -> bool:
    if filters.status == StatusFilter.COMPLETED and not task.completed:
        return False
    if filters.status == StatusFilter.INCOMPLETE and task.completed:
        return False

    if filters.priority != ALL and task.priority != filters.priority:
        return False
    if filters.category != ALL and task.category != filters.category:
        return False
    if filters.assigned_user != ALL and task.assigned_user != filters.assigned_user:
        return False

    if filters.due_date != ALL:
        return due_bucket(task, now) == filters.due_date

    return True


def visible(tasks: Sequence[Task], filters: TaskFilters, now: date | datetime) -> list[Task]:
    """Tasks passing every active filter field, in input order."""
    if filters.is_default():
        return list(tasks)
    return [t for t in tasks if matches(t, filters, now)]


def filter_options(tasks: Iterable[Task]) -> tuple[list[str], list[str]]:
    """Distinct categories and assignees (sorted) offered as filter choices."""
    categories: set[str] = set()
    users: set[str] = set()
    for t in tasks:
        categories.add(t.category)
        users.add(t.assigned_user)
    return sorted(categories), sorted(users)
