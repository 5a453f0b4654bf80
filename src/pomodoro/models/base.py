"""
Base SQLAlchemy declarative class and common model mixins.

This module provides the foundation for all ORM models in the application.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import declarative_base


# Create base declarative class
Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamp fields.

    Attributes:
        created_at: Timestamp when the record was created (UTC)
        updated_at: Timestamp when the record was last updated (UTC)
    """

    created_at = Column(DateTime, default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


class OwnedMixin:
    """
    Mixin for records that belong to exactly one user.

    Attributes:
        id: Primary key, generated on insert when not supplied
        app_user_id: Id of the owning user; never changes after insert
    """

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    app_user_id = Column(Uuid, nullable=False, index=True)
