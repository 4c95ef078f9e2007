"""
Task ORM model.

A unit of work with a deadline, an assignee, a status and effort tracking.
"""

from sqlalchemy import Column, String, Text, Float, DateTime, JSON, Enum, ForeignKey
from sqlalchemy.orm import relationship

from taskboard.models.base import Base, UUIDPrimaryKeyMixin, CreatedAtMixin
from taskboard.models.enums import TaskStatus


class Task(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """
    Task assigned to exactly one user.

    Attributes:
        id: UUID primary key
        title: Non-empty title
        description: Optional free text
        deadline: Due timestamp (naive UTC)
        assigned_member_id: Foreign key to users.id
        effort_spent: Hours spent so far, never negative
        status: Current TaskStatus
        dependencies: Ids of other tasks; stored as given, not validated
        created_at: Creation timestamp
    """

    __tablename__ = "tasks"

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(DateTime, nullable=False, index=True)
    assigned_member_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    effort_spent = Column(Float, nullable=False, default=0)
    status = Column(
        Enum(TaskStatus, name="task_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TaskStatus.TODO,
        index=True,
    )
    dependencies = Column(JSON, nullable=False, default=list)

    assigned_member = relationship("User", back_populates="tasks")

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status={self.status})>"
