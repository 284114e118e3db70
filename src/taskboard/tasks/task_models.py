# src/taskboard/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import date
from enum import StrEnum
from typing import Any

ALL = "all"


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Case-insensitive lookup ("high" -> HIGH). Raises ValueError on unknown input."""
        text = (raw or "").strip().lower()
        for p in cls:
            if p.value.lower() == text:
                return p
        raise ValueError(f"Unknown priority: {raw!r}")


class StatusFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"


class DueDateFilter(StrEnum):
    """
    Due-date buckets relative to the current day.

    OVERDUE / TODAY / UPCOMING partition every dated task; NO_DUE_DATE holds the rest.
    """

    ALL = "all"
    OVERDUE = "overdue"
    TODAY = "today"
    UPCOMING = "upcoming"
    NO_DUE_DATE = "no-due-date"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    task_name: str
    priority: Priority
    category: str
    due_date: date | None
    assigned_user: str
    assigned_on: date
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskFilters:
    """
    Active query over tasks: one choice per field, "all" means "no constraint".

    priority / category / assigned_user hold either "all" or the exact value to match.
    """

    status: str = StatusFilter.ALL
    priority: str = ALL
    category: str = ALL
    due_date: str = DueDateFilter.ALL
    assigned_user: str = ALL

    def merged(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> TaskFilters:
        updates = dict(partial or {})
        updates.update(changes)
        if not updates:
            return self
        return replace(self, **updates)

    def is_default(self) -> bool:
        return all(getattr(self, name) == ALL for name in FILTER_FIELDS)

    def active(self) -> dict[str, str]:
        return {
            name: str(getattr(self, name))
            for name in FILTER_FIELDS
            if getattr(self, name) != ALL
        }


FILTER_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(TaskFilters))

DEFAULT_FILTERS = TaskFilters()
