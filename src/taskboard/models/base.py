"""
Base SQLAlchemy declarative class and common model mixins.

This module provides the foundation for all ORM models in the application.
"""

import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base

from taskboard.core.clock import utc_now


# Create base declarative class
Base = declarative_base()


def generate_uuid() -> str:
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    """
    Mixin that adds a string UUID primary key generated on insert.

    Attributes:
        id: UUID4 rendered as a 36-character string
    """

    id = Column(String(36), primary_key=True, default=generate_uuid)


class CreatedAtMixin:
    """
    Mixin that adds an immutable creation timestamp.

    Attributes:
        created_at: Timestamp when the record was created (naive UTC)
    """

    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
