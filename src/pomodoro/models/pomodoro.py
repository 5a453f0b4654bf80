"""
Pomodoro ORM model.

A pomodoro is one recorded work interval of a task. It carries the owner of
its task so ownership checks treat it like any other owned record.
"""

from sqlalchemy import Column, String, DateTime, Interval, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from pomodoro.core.constants import POMODORO_COMMENT_MAX_LENGTH
from pomodoro.models.base import Base, OwnedMixin, TimestampMixin


class Pomodoro(OwnedMixin, TimestampMixin, Base):
    """Work interval recorded against a task."""

    __tablename__ = "pomodoros"

    start_dt = Column(DateTime, nullable=False)
    duration = Column(Interval, nullable=False)
    comment = Column(String(POMODORO_COMMENT_MAX_LENGTH), nullable=True)
    task_id = Column(Uuid, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    timer_settings_id = Column(Uuid, ForeignKey("timer_settings.id", ondelete="SET NULL"), nullable=True)

    task = relationship("AppTask", back_populates="pomodoros")
