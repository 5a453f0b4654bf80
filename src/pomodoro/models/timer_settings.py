"""
Timer settings ORM model.

Durations are stored in minutes.
"""

from sqlalchemy import Column, Integer, String

from pomodoro.core.constants import TIMER_SETTINGS_NAME_MAX_LENGTH
from pomodoro.models.base import Base, OwnedMixin, TimestampMixin


class TimerSettings(OwnedMixin, TimestampMixin, Base):
    """Work and break lengths a user runs pomodoros with."""

    __tablename__ = "timer_settings"

    name = Column(String(TIMER_SETTINGS_NAME_MAX_LENGTH), nullable=True)
    pomodoro = Column(Integer, nullable=False, default=25)
    short_break = Column(Integer, nullable=False, default=5)
    long_break = Column(Integer, nullable=False, default=15)
    pomodoros_before_long_break = Column(Integer, nullable=False, default=4)
