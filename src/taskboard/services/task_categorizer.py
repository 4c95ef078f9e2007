"""
Dashboard task categorization.

Buckets a collection of tasks relative to a reference instant. The
function is pure: callers supply ``now`` so results are reproducible.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Protocol

from taskboard.core.clock import to_naive_utc
from taskboard.models.enums import TaskStatus


NEARING_DEADLINE_WINDOW = timedelta(days=3)


class CategorizableTask(Protocol):
    deadline: datetime
    status: TaskStatus


@dataclass
class DashboardBuckets:
    """
    Possibly-overlapping task subsets plus the unconditional total.

    Attributes:
        overdue: Past deadline and not done
        nearing_deadline: Deadline within [now, now + 3 days] and not done
        in_progress: Status is in_progress, whatever the deadline
        total: Number of tasks considered
    """
    overdue: List = field(default_factory=list)
    nearing_deadline: List = field(default_factory=list)
    in_progress: List = field(default_factory=list)
    total: int = 0


def is_overdue(task: CategorizableTask, now: datetime) -> bool:
    return task.deadline < now and task.status != TaskStatus.DONE


def is_nearing_deadline(task: CategorizableTask, now: datetime) -> bool:
    # deadline == now counts as nearing, not overdue
    return (
        now <= task.deadline <= now + NEARING_DEADLINE_WINDOW
        and task.status != TaskStatus.DONE
    )


def is_in_progress(task: CategorizableTask) -> bool:
    return task.status == TaskStatus.IN_PROGRESS


def categorize_tasks(tasks: Iterable[CategorizableTask], now: datetime) -> DashboardBuckets:
    """
    Partition tasks into the dashboard buckets.

    Args:
        tasks: Tasks to categorize; order is preserved inside each bucket
        now: Reference instant; aware values are converted to naive UTC

    Returns:
        DashboardBuckets for ``tasks`` at ``now``
    """
    now = to_naive_utc(now)
    buckets = DashboardBuckets()

    for task in tasks:
        buckets.total += 1
        if is_overdue(task, now):
            buckets.overdue.append(task)
        if is_nearing_deadline(task, now):
            buckets.nearing_deadline.append(task)
        if is_in_progress(task):
            buckets.in_progress.append(task)

    return buckets
