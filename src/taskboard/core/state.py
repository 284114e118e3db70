# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import Clock, IdProvider, SystemClock, UuidIdProvider


class StoreNotInitializedError(RuntimeError):
    """Task store accessed before it was wired. Configuration bug, not recoverable."""


@dataclass(slots=True)
class AppState:
    """
    Handle passed explicitly to every component that reads tasks or dispatches changes.

    There is no global store: a component cannot be built without one of these.
    """

    settings: Any
    task_store: TaskStore
    clock: Clock = field(default_factory=SystemClock)
    ids: IdProvider = field(default_factory=UuidIdProvider)

    def __post_init__(self) -> None:
        if self.task_store is None:
            raise StoreNotInitializedError("AppState requires an initialized TaskStore")


def require_store(state: AppState | None) -> TaskStore:
    """Return the task store from `state`; fail loudly if there is none."""
    store = getattr(state, "task_store", None)
    if store is None:
        raise StoreNotInitializedError(
            "Task store is not initialized; build AppState via create_initial_state()"
        )
    return store
