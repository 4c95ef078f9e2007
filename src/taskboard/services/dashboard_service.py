"""
Dashboard Service

Loads tasks joined to their assignees and buckets them with the
categorizer.
"""

import logging
from datetime import datetime
from typing import Optional

from taskboard.core.clock import utc_now
from taskboard.repositories.unit_of_work import UnitOfWork
from taskboard.services.task_categorizer import DashboardBuckets, categorize_tasks

logger = logging.getLogger("DASHBOARD_SERVICE")


class DashboardService:

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def get_dashboard(self, now: Optional[datetime] = None) -> DashboardBuckets:
        now = now or utc_now()
        tasks = self.uow.tasks.get_with_assignees()
        buckets = categorize_tasks(tasks, now)
        logger.debug(
            f"Dashboard at {now.isoformat()}: total={buckets.total} overdue={len(buckets.overdue)} "
            f"nearing={len(buckets.nearing_deadline)} in_progress={len(buckets.in_progress)}"
        )
        return buckets
