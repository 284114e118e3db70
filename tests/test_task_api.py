# tests/test_task_api.py

from __future__ import annotations

from datetime import date, timedelta

import pytest

from taskboard.tasks.task_api import (
    TaskValidationError,
    build_task,
    parse_date,
    revise_task,
    seed_tasks,
)
from taskboard.tasks.task_filters import due_bucket
from taskboard.tasks.task_models import DueDateFilter, Priority

from .conftest import NOW


def test_build_task_trims_and_applies_defaults(ids, clock) -> None:
    task = build_task(
        task_name="  Write docs ",
        category=" Docs",
        assigned_user="Alice  ",
        ids=ids,
        clock=clock,
    )

    assert task.id == "id001"
    assert task.task_name == "Write docs"
    assert task.category == "Docs"
    assert task.assigned_user == "Alice"
    assert task.priority is Priority.MEDIUM
    assert task.due_date is None
    assert task.assigned_on == NOW.date()
    assert task.completed is False


def test_build_task_parses_priority_and_dates(ids, clock) -> None:
    task = build_task(
        task_name="Ship",
        category="Release",
        assigned_user="Bob",
        priority="high",
        due_date="2024-06-01",
        assigned_on="2024-05-10",
        ids=ids,
        clock=clock,
    )
    assert task.priority is Priority.HIGH
    assert task.due_date == date(2024, 6, 1)
    assert task.assigned_on == date(2024, 5, 10)


@pytest.mark.parametrize("missing", ["task_name", "category", "assigned_user"])
def test_build_task_rejects_blank_required_fields(ids, clock, missing) -> None:
    kwargs = {"task_name": "A", "category": "B", "assigned_user": "C"}
    kwargs[missing] = "   "
    with pytest.raises(TaskValidationError, match=missing):
        build_task(ids=ids, clock=clock, **kwargs)
    assert ids.issued == []


def test_build_task_rejects_unknown_priority(ids, clock) -> None:
    with pytest.raises(TaskValidationError):
        build_task(task_name="A", category="B", assigned_user="C", priority="urgent",
                   ids=ids, clock=clock)


@pytest.mark.parametrize("raw", ["", "none", "-", " NONE ", None])
def test_parse_date_empty_values(raw) -> None:
    assert parse_date(raw) is None


def test_parse_date_invalid() -> None:
    with pytest.raises(TaskValidationError):
        parse_date("31/12/2024")


def test_revise_task_keeps_identity_and_completion(ids, clock) -> None:
    task = build_task(task_name="A", category="B", assigned_user="C", ids=ids, clock=clock)
    done = revise_task(task)
    assert done == task

    edited = revise_task(task, task_name=" Renamed ", priority="Low", due_date="2024-05-20")
    assert edited.id == task.id
    assert edited.completed == task.completed
    assert edited.task_name == "Renamed"
    assert edited.priority is Priority.LOW
    assert edited.due_date == date(2024, 5, 20)
    assert edited.category == "B"

    cleared = revise_task(edited, due_date="none")
    assert cleared.due_date is None


def test_revise_task_validates(ids, clock) -> None:
    task = build_task(task_name="A", category="B", assigned_user="C", ids=ids, clock=clock)
    with pytest.raises(TaskValidationError):
        revise_task(task, category="  ")
    with pytest.raises(TaskValidationError):
        revise_task(task, assigned_on="")
    with pytest.raises(TaskValidationError, match="Unknown"):
        revise_task(task, completed=True)


def test_seed_tasks_cover_each_bucket(ids, clock) -> None:
    seeded = seed_tasks(ids, clock)

    assert [t.id for t in seeded] == ["id001", "id002", "id003"]
    buckets = [due_bucket(t, clock.now()) for t in seeded]
    assert buckets == [DueDateFilter.UPCOMING, DueDateFilter.OVERDUE, DueDateFilter.NO_DUE_DATE]
    assert seeded[0].due_date == NOW.date() + timedelta(days=2)
    assert [t.completed for t in seeded] == [False, False, True]
