"""
Enumeration types used across ORM models.

This module centralizes all enum definitions to ensure consistency
across the application and make them easy to import.
"""

import enum


class TaskStatus(str, enum.Enum):
    """
    Status of a task.

    Attributes:
        TODO: Not started
        IN_PROGRESS: Being worked on
        DONE: Finished
        OVERDUE: Storable marker; only ever set by an explicit update
    """
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    OVERDUE = "overdue"
