"""
User ORM model.

Stores team members that tasks are assigned to.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from taskboard.models.base import Base, UUIDPrimaryKeyMixin, CreatedAtMixin


class User(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """Team member with a unique email address."""

    __tablename__ = "users"

    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)

    tasks = relationship("Task", back_populates="assigned_member")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
