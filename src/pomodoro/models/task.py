"""
Task ORM model.

Named ``AppTask`` to keep clear of ``asyncio.Task`` in calling code.
"""

from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from pomodoro.core.constants import TASK_TITLE_MAX_LENGTH, TASK_DESCRIPTION_MAX_LENGTH
from pomodoro.models.base import Base, OwnedMixin, TimestampMixin


class AppTask(OwnedMixin, TimestampMixin, Base):
    """Task owned by a user, optionally filed under a category."""

    __tablename__ = "tasks"

    title = Column(String(TASK_TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(TASK_DESCRIPTION_MAX_LENGTH), nullable=True)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="CASCADE"), nullable=True, index=True)
    timer_settings_id = Column(Uuid, ForeignKey("timer_settings.id", ondelete="SET NULL"), nullable=True)

    category = relationship("Category", back_populates="tasks")
    timer_settings = relationship("TimerSettings")
    pomodoros = relationship(
        "Pomodoro",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="Pomodoro.start_dt",
    )
