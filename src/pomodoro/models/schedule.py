"""
Schedule ORM model.
"""

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from pomodoro.core.constants import SCHEDULE_TITLE_MAX_LENGTH, SCHEDULE_DESCRIPTION_MAX_LENGTH
from pomodoro.models.base import Base, OwnedMixin, TimestampMixin


class Schedule(OwnedMixin, TimestampMixin, Base):
    """Planned time slot, optionally tied to a category."""

    __tablename__ = "schedules"

    title = Column(String(SCHEDULE_TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(SCHEDULE_DESCRIPTION_MAX_LENGTH), nullable=True)
    start_dt = Column(DateTime, nullable=False, index=True)
    finish_dt = Column(DateTime, nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="CASCADE"), nullable=True, index=True)

    category = relationship("Category", back_populates="schedules")
