# src/taskboard/tasks/task_commands.py

"""
Store intents.

Every state change goes through one of these variants; task_store.apply() is the
only place that interprets them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .task_models import Task


@dataclass(frozen=True, slots=True)
class AddTask:
    task: Task


@dataclass(frozen=True, slots=True)
class UpdateTask:
    task: Task


@dataclass(frozen=True, slots=True)
class DeleteTask:
    task_id: str


@dataclass(frozen=True, slots=True)
class ToggleTask:
    task_id: str


@dataclass(frozen=True, slots=True)
class SetFilters:
    partial: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ClearFilters:
    pass


TaskCommand = AddTask | UpdateTask | DeleteTask | ToggleTask | SetFilters | ClearFilters
