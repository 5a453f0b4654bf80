"""
Schedule Repository

Data access layer for schedules.
"""

from sqlalchemy.orm import Session

from pomodoro.models.schedule import Schedule
from pomodoro.repositories.base import BaseRepository


class ScheduleRepository(BaseRepository[Schedule]):
    """Repository for schedules."""

    def __init__(self, db: Session):
        super().__init__(Schedule, db)
