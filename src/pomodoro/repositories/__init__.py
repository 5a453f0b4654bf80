"""
Repositories package.

This package contains all data access layer repositories following the Repository Pattern.
Each repository extends BaseRepository and binds it to one owned model.

Usage:
    from pomodoro.repositories import CategoryRepository
    from pomodoro.core.database import get_db

    # In a FastAPI route with dependency injection:
    def get_categories(user_id: UUID, db: Session = Depends(get_db)):
        repo = CategoryRepository(db)
        return repo.list_for_owner(user_id)
"""

from pomodoro.repositories.base import BaseRepository
from pomodoro.repositories.category_repository import CategoryRepository
from pomodoro.repositories.task_repository import TaskRepository
from pomodoro.repositories.schedule_repository import ScheduleRepository
from pomodoro.repositories.timer_settings_repository import TimerSettingsRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "TaskRepository",
    "ScheduleRepository",
    "TimerSettingsRepository",
]
