# src/taskboard/tasks/task_api.py

"""
Form-side helpers.

The store accepts tasks as-is. Whoever creates or edits a task (the console
commands) goes through these helpers first so that names are trimmed, required
fields are non-empty and ids/dates come from the injected providers.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any

from ..core.ports import Clock, IdProvider
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = ("task_name", "category", "assigned_user")
_EMPTY_DATE = {"", "none", "-", "null"}


class TaskValidationError(ValueError):
    pass


def parse_date(raw: str | date | None) -> date | None:
    """Parse YYYY-MM-DD; empty / "none" / "-" mean "no date"."""
    if isinstance(raw, datetime):
        return raw.date()
    if raw is None or isinstance(raw, date):
        return raw
    text = raw.strip()
    if text.lower() in _EMPTY_DATE:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise TaskValidationError(f"Invalid date {raw!r}. Use YYYY-MM-DD.") from e


def _clean_text(name: str, value: Any) -> str:
    text = str(value or "").strip()
    if not text:
        raise TaskValidationError(f"{name} is required")
    return text


def _coerce_priority(value: Priority | str) -> Priority:
    if isinstance(value, Priority):
        return value
    try:
        return Priority.parse(value)
    except ValueError as e:
        raise TaskValidationError(str(e)) from e


def build_task(
    *,
    task_name: str,
    category: str,
    assigned_user: str,
    ids: IdProvider,
    clock: Clock,
    priority: Priority | str = Priority.MEDIUM,
    due_date: str | date | None = None,
    assigned_on: str | date | None = None,
) -> Task:
    """New task with a fresh id, completed=False and assigned_on defaulting to today."""
    # validate everything before an id is drawn
    name = _clean_text("task_name", task_name)
    cat = _clean_text("category", category)
    user = _clean_text("assigned_user", assigned_user)
    prio = _coerce_priority(priority)
    due = parse_date(due_date)
    on = parse_date(assigned_on)

    task = Task(
        id=ids.new_id(),
        task_name=name,
        priority=prio,
        category=cat,
        due_date=due,
        assigned_user=user,
        assigned_on=on if on is not None else clock.now().date(),
        completed=False,
    )
    logger.debug("Task built id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
    return task


def revise_task(task: Task, **changes: Any) -> Task:
    """
    Edited copy of `task`. The id and completion flag are kept.

    Accepts the same fields as build_task(); missing keys keep their current value.
    """
    unknown = set(changes) - {
        "task_name",
        "category",
        "assigned_user",
        "priority",
        "due_date",
        "assigned_on",
    }
    if unknown:
        raise TaskValidationError(f"Unknown task field(s): {', '.join(sorted(unknown))}")

    updates: dict[str, Any] = {}
    for name in _REQUIRED_TEXT:
        if name in changes:
            updates[name] = _clean_text(name, changes[name])
    if "priority" in changes:
        updates["priority"] = _coerce_priority(changes["priority"])
    if "due_date" in changes:
        updates["due_date"] = parse_date(changes["due_date"])
    if "assigned_on" in changes:
        on = parse_date(changes["assigned_on"])
        if on is None:
            raise TaskValidationError("assigned_on cannot be empty")
        updates["assigned_on"] = on

    return replace(task, **updates)


def seed_tasks(ids: IdProvider, clock: Clock) -> list[Task]:
    """Demo tasks shown on first start: one upcoming, one overdue, one done without a due date."""
    today = clock.now().date()
    return [
        Task(
            id=ids.new_id(),
            task_name="Design login screen",
            priority=Priority.HIGH,
            category="Frontend",
            due_date=today + timedelta(days=2),
            assigned_user="Alice",
            assigned_on=today,
        ),
        Task(
            id=ids.new_id(),
            task_name="API auth endpoints",
            priority=Priority.MEDIUM,
            category="Backend",
            due_date=today - timedelta(days=1),
            assigned_user="Bob",
            assigned_on=today - timedelta(days=3),
        ),
        Task(
            id=ids.new_id(),
            task_name="Sprint planning",
            priority=Priority.LOW,
            category="Meeting",
            due_date=None,
            assigned_user="Carol",
            assigned_on=today,
            completed=True,
        ),
    ]
