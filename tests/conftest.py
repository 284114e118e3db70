# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_store import TaskStore

from .fakes import FixedClock, SequentialIds

NOW = datetime(2024, 5, 15, 10, 30)


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        log_to_file=False,
        seed_demo_tasks=False,
        id_display_length=8,
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def store(clock: FixedClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, clock: FixedClock, ids: SequentialIds) -> AppState:
    """AppState wired with an empty store and deterministic providers."""
    return AppState(settings=settings, task_store=store, clock=clock, ids=ids)
