"""
Task Repository

Data access layer for tasks and their pomodoros.
"""

from sqlalchemy.orm import Session, selectinload

from pomodoro.models.task import AppTask
from pomodoro.repositories.base import BaseRepository


class TaskRepository(BaseRepository[AppTask]):
    """Repository for tasks."""

    loader_options = (selectinload(AppTask.pomodoros),)

    def __init__(self, db: Session):
        super().__init__(AppTask, db)
