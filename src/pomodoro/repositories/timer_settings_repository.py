"""
Timer Settings Repository

Data access layer for timer settings.
"""

from sqlalchemy.orm import Session

from pomodoro.models.timer_settings import TimerSettings
from pomodoro.repositories.base import BaseRepository


class TimerSettingsRepository(BaseRepository[TimerSettings]):
    """Repository for timer settings."""

    def __init__(self, db: Session):
        super().__init__(TimerSettings, db)
