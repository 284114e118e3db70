# tests/test_task_filters.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from taskboard.tasks.task_filters import due_bucket, filter_options, visible
from taskboard.tasks.task_models import DueDateFilter, Priority, TaskFilters

from .conftest import NOW
from .fakes import make_task

TODAY = NOW.date()
YESTERDAY = TODAY - timedelta(days=1)
TOMORROW = TODAY + timedelta(days=1)


@pytest.fixture()
def tasks():
    return [
        make_task("1", due_date=YESTERDAY, completed=False, priority=Priority.HIGH,
                  category="Backend", assigned_user="Bob"),
        make_task("2", due_date=None, completed=True, priority=Priority.LOW,
                  category="Meeting", assigned_user="Carol"),
        make_task("3", due_date=TODAY, completed=False, priority=Priority.MEDIUM,
                  category="Frontend", assigned_user="Alice"),
        make_task("4", due_date=TOMORROW, completed=True, priority=Priority.HIGH,
                  category="Frontend", assigned_user="Alice"),
    ]


def _ids(tasks) -> list[str]:
    return [t.id for t in tasks]


def test_all_filters_return_input_unchanged(tasks) -> None:
    out = visible(tasks, TaskFilters(), NOW)
    assert out == tasks
    assert out is not tasks


def test_incomplete_and_overdue(tasks) -> None:
    seed = tasks[:2]
    filters = TaskFilters(status="incomplete", due_date="overdue")
    assert _ids(visible(seed, filters, NOW)) == ["1"]


@pytest.mark.parametrize(
    ("status", "expected"),
    [("all", ["1", "2", "3", "4"]), ("completed", ["2", "4"]), ("incomplete", ["1", "3"])],
)
def test_status(tasks, status, expected) -> None:
    assert _ids(visible(tasks, TaskFilters(status=status), NOW)) == expected


@pytest.mark.parametrize(
    ("bucket", "expected"),
    [
        ("overdue", ["1"]),
        ("today", ["3"]),
        ("upcoming", ["4"]),
        ("no-due-date", ["2"]),
    ],
)
def test_due_date_buckets(tasks, bucket, expected) -> None:
    assert _ids(visible(tasks, TaskFilters(due_date=bucket), NOW)) == expected


def test_task_due_today_is_neither_overdue_nor_upcoming() -> None:
    task = make_task("t", due_date=TODAY)

    assert visible([task], TaskFilters(due_date="today"), NOW) == [task]
    assert visible([task], TaskFilters(due_date="overdue"), NOW) == []
    assert visible([task], TaskFilters(due_date="upcoming"), NOW) == []


@pytest.mark.parametrize(
    "now",
    [
        datetime.combine(TODAY, datetime.min.time()),
        datetime.combine(TODAY, datetime.max.time()),
        TODAY,
    ],
)
def test_day_boundaries(now) -> None:
    yesterday = make_task("y", due_date=YESTERDAY)
    today = make_task("t", due_date=TODAY)
    tomorrow = make_task("n", due_date=TOMORROW)

    assert due_bucket(yesterday, now) is DueDateFilter.OVERDUE
    assert due_bucket(today, now) is DueDateFilter.TODAY
    assert due_bucket(tomorrow, now) is DueDateFilter.UPCOMING


def test_dated_buckets_partition_dated_tasks(tasks) -> None:
    dated = [t for t in tasks if t.due_date is not None]
    seen: list[str] = []
    for bucket in ("overdue", "today", "upcoming"):
        seen.extend(_ids(visible(dated, TaskFilters(due_date=bucket), NOW)))
    assert sorted(seen) == sorted(_ids(dated))
    assert len(seen) == len(set(seen))


def test_exact_match_fields(tasks) -> None:
    assert _ids(visible(tasks, TaskFilters(priority="High"), NOW)) == ["1", "4"]
    assert _ids(visible(tasks, TaskFilters(category="Frontend"), NOW)) == ["3", "4"]
    assert _ids(visible(tasks, TaskFilters(assigned_user="Alice"), NOW)) == ["3", "4"]
    # exact, not case-insensitive
    assert visible(tasks, TaskFilters(category="frontend"), NOW) == []


def test_fields_combine_with_and(tasks) -> None:
    filters = TaskFilters(status="completed", priority="High", category="Frontend",
                          due_date="upcoming", assigned_user="Alice")
    assert _ids(visible(tasks, filters, NOW)) == ["4"]

    filters = TaskFilters(status="incomplete", assigned_user="Carol")
    assert visible(tasks, filters, NOW) == []


def test_visible_is_idempotent(tasks) -> None:
    filters = TaskFilters(status="incomplete", priority="High")
    assert visible(tasks, filters, NOW) == visible(tasks, filters, NOW)


def test_filter_options_are_distinct_and_sorted(tasks) -> None:
    categories, users = filter_options(tasks)
    assert categories == ["Backend", "Frontend", "Meeting"]
    assert users == ["Alice", "Bob", "Carol"]
