# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any

from ..core.ports import Clock, SystemClock
from .task_commands import (
    AddTask,
    ClearFilters,
    DeleteTask,
    SetFilters,
    TaskCommand,
    ToggleTask,
    UpdateTask,
)
from .task_filters import visible
from .task_models import DEFAULT_FILTERS, Task, TaskFilters

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskState:
    """
    One immutable snapshot of the store.

    tasks are kept most-recent-add first.
    """

    tasks: tuple[Task, ...] = ()
    filters: TaskFilters = DEFAULT_FILTERS

    @classmethod
    def initial(cls, tasks: Iterable[Task] = ()) -> TaskState:
        return cls(tasks=tuple(tasks), filters=DEFAULT_FILTERS)


def _index_of(tasks: tuple[Task, ...], task_id: str) -> int | None:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None


def apply(state: TaskState, command: TaskCommand) -> TaskState:
    """
    Transition function: returns the next snapshot, never mutates `state`.

    Commands that reference an unknown id return `state` itself.
    """
    match command:
        case AddTask(task=task):
            if _index_of(state.tasks, task.id) is not None:
                logger.warning("AddTask ignored: duplicate id=%s", task.id)
                return state
            return replace(state, tasks=(task, *state.tasks))

        case UpdateTask(task=task):
            idx = _index_of(state.tasks, task.id)
            if idx is None:
                logger.debug("UpdateTask no-op: unknown id=%s", task.id)
                return state
            tasks = state.tasks[:idx] + (task,) + state.tasks[idx + 1 :]
            return replace(state, tasks=tasks)

        case DeleteTask(task_id=task_id):
            idx = _index_of(state.tasks, task_id)
            if idx is None:
                logger.debug("DeleteTask no-op: unknown id=%s", task_id)
                return state
            return replace(state, tasks=state.tasks[:idx] + state.tasks[idx + 1 :])

        case ToggleTask(task_id=task_id):
            idx = _index_of(state.tasks, task_id)
            if idx is None:
                logger.debug("ToggleTask no-op: unknown id=%s", task_id)
                return state
            old = state.tasks[idx]
            toggled = replace(old, completed=not old.completed)
            tasks = state.tasks[:idx] + (toggled,) + state.tasks[idx + 1 :]
            return replace(state, tasks=tasks)

        case SetFilters(partial=partial):
            filters = state.filters.merged(partial)
            if filters == state.filters:
                return state
            return replace(state, filters=filters)

        case ClearFilters():
            return replace(state, filters=DEFAULT_FILTERS)

    raise TypeError(f"Unsupported task command: {command!r}")


class TaskStore:
    """
    In-memory task store: the single owner of the task list and filter selection.

    Every operation builds a new TaskState via apply() and swaps it in as a whole,
    so readers between operations always see a consistent (tasks, filters) pair.
    Nothing is persisted.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._state = TaskState.initial(tasks)

        # visible_tasks() cache: (snapshot, day) -> result
        self._visible_key: tuple[TaskState, date] | None = None
        self._visible: tuple[Task, ...] = ()

        logger.info("TaskStore ready total=%s", len(self._state.tasks))

    # ---- read access ----

    @property
    def state(self) -> TaskState:
        return self._state

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._state.tasks

    @property
    def filters(self) -> TaskFilters:
        return self._state.filters

    def count_tasks(self) -> int:
        return len(self._state.tasks)

    def find_task(self, task_id: str) -> Task | None:
        for t in self._state.tasks:
            if t.id == task_id:
                return t
        return None

    def visible_tasks(self, now: date | datetime | None = None) -> list[Task]:
        """
        Tasks of the current snapshot that pass the current filters.

        Recomputed only when the snapshot or the calendar day changes.
        """
        if now is None:
            now = self._clock.now()
        day = now.date() if isinstance(now, datetime) else now

        state = self._state
        key = self._visible_key
        if key is None or key[0] is not state or key[1] != day:
            self._visible = tuple(visible(state.tasks, state.filters, now))
            self._visible_key = (state, day)
        return list(self._visible)

    # ---- transitions ----

    def dispatch(self, command: TaskCommand) -> TaskState:
        new_state = apply(self._state, command)
        if new_state is not self._state:
            logger.debug("Store transition %s tasks=%s", type(command).__name__, len(new_state.tasks))
        self._state = new_state
        return new_state

    def add_task(self, task: Task) -> TaskState:
        return self.dispatch(AddTask(task))

    def update_task(self, task: Task) -> TaskState:
        return self.dispatch(UpdateTask(task))

    def delete_task(self, task_id: str) -> TaskState:
        return self.dispatch(DeleteTask(task_id))

    def toggle_task(self, task_id: str) -> TaskState:
        return self.dispatch(ToggleTask(task_id))

    def set_filters(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> TaskState:
        updates = dict(partial or {})
        updates.update(changes)
        return self.dispatch(SetFilters(updates))

    def clear_filters(self) -> TaskState:
        return self.dispatch(ClearFilters())
