"""
Category Repository

Data access layer for categories. Reads load the nested tasks (with their
pomodoros) and schedules in the same round trip.
"""

from sqlalchemy.orm import Session, selectinload

from pomodoro.models.category import Category
from pomodoro.models.task import AppTask
from pomodoro.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for categories."""

    loader_options = (
        selectinload(Category.tasks).selectinload(AppTask.pomodoros),
        selectinload(Category.schedules),
    )

    def __init__(self, db: Session):
        super().__init__(Category, db)
