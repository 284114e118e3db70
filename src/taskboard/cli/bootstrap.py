# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once (unless injected),
- picks the id / clock providers,
- builds the single TaskStore and hands it out through AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock, IdProvider, SystemClock, UuidIdProvider
from ..core.state import AppState
from ..tasks.task_api import seed_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    clock: Clock | None = None,
    ids: IdProvider | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and providers injectable makes the app easier to test and
    avoids hidden global reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    clock = clock or SystemClock()
    ids = ids or UuidIdProvider()

    initial = seed_tasks(ids, clock) if getattr(settings, "seed_demo_tasks", False) else []
    if initial:
        logger.debug("Seeding %d demo tasks.", len(initial))

    return AppState(
        settings=settings,
        task_store=TaskStore(initial, clock=clock),
        clock=clock,
        ids=ids,
    )
