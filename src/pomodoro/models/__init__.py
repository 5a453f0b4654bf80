"""
ORM Models package.

This package contains all SQLAlchemy ORM models organized by domain.
All models are imported here for easy access and to ensure proper
model registration with SQLAlchemy.

Usage:
    from pomodoro.models import Category, AppTask, Schedule
    from pomodoro.models.base import Base
"""

from pomodoro.models.base import Base, TimestampMixin, OwnedMixin

from pomodoro.models.category import Category
from pomodoro.models.task import AppTask
from pomodoro.models.schedule import Schedule
from pomodoro.models.timer_settings import TimerSettings
from pomodoro.models.pomodoro import Pomodoro

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "OwnedMixin",

    # Models
    "Category",
    "AppTask",
    "Schedule",
    "TimerSettings",
    "Pomodoro",
]
