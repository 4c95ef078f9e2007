from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from taskboard.models.enums import TaskStatus
from taskboard.services.task_categorizer import (
    NEARING_DEADLINE_WINDOW,
    categorize_tasks,
    is_nearing_deadline,
    is_overdue,
)

NOW = datetime(2030, 6, 15, 12, 0, 0)


def make_task(deadline: datetime, status: TaskStatus = TaskStatus.TODO, title: str = "t"):
    return SimpleNamespace(title=title, deadline=deadline, status=status)


def test_deadline_equal_to_now_is_nearing_not_overdue() -> None:
    task = make_task(NOW)

    buckets = categorize_tasks([task], NOW)

    assert buckets.nearing_deadline == [task]
    assert buckets.overdue == []


def test_window_upper_bound_is_inclusive() -> None:
    on_edge = make_task(NOW + timedelta(days=3))
    past_edge = make_task(NOW + timedelta(days=3, seconds=1))

    buckets = categorize_tasks([on_edge, past_edge], NOW)

    assert buckets.nearing_deadline == [on_edge]
    assert buckets.overdue == []
    assert buckets.total == 2


def test_past_deadline_is_overdue() -> None:
    task = make_task(NOW - timedelta(seconds=1))

    assert is_overdue(task, NOW)
    assert not is_nearing_deadline(task, NOW)


@pytest.mark.parametrize("offset", [timedelta(days=-30), timedelta(0), timedelta(days=1), timedelta(days=10)])
def test_done_tasks_are_never_overdue_or_nearing(offset) -> None:
    task = make_task(NOW + offset, TaskStatus.DONE)

    buckets = categorize_tasks([task], NOW)

    assert buckets.overdue == []
    assert buckets.nearing_deadline == []
    assert buckets.in_progress == []
    assert buckets.total == 1


def test_in_progress_ignores_deadline_and_overlaps() -> None:
    near = make_task(NOW + timedelta(days=1), TaskStatus.IN_PROGRESS, "near")
    late = make_task(NOW - timedelta(days=1), TaskStatus.IN_PROGRESS, "late")
    far = make_task(NOW + timedelta(days=30), TaskStatus.IN_PROGRESS, "far")

    buckets = categorize_tasks([near, late, far], NOW)

    assert buckets.in_progress == [near, late, far]
    assert buckets.nearing_deadline == [near]
    assert buckets.overdue == [late]


def test_overdue_status_value_has_no_special_meaning() -> None:
    future = make_task(NOW + timedelta(days=10), TaskStatus.OVERDUE)

    buckets = categorize_tasks([future], NOW)

    assert buckets.overdue == []
    assert buckets.nearing_deadline == []


def test_total_counts_every_task() -> None:
    tasks = [
        make_task(NOW - timedelta(days=2)),
        make_task(NOW + timedelta(days=2), TaskStatus.DONE),
        make_task(NOW + timedelta(days=20)),
    ]

    assert categorize_tasks(tasks, NOW).total == 3
    assert categorize_tasks([], NOW).total == 0


def test_aware_now_is_converted_to_utc() -> None:
    task = make_task(NOW + timedelta(hours=1))
    # 14:00 at UTC+2 is 12:00 UTC
    aware_now = datetime(2030, 6, 15, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    buckets = categorize_tasks([task], aware_now)

    assert buckets.nearing_deadline == [task]


def test_window_is_three_days() -> None:
    assert NEARING_DEADLINE_WINDOW == timedelta(days=3)
