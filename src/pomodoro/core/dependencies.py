from fastapi import Depends
from sqlalchemy.orm import Session

from pomodoro.core.database import get_db
from pomodoro.services.crud_service import CrudService
from pomodoro.services.mapping import (
    CATEGORY_MAPPER,
    SCHEDULE_MAPPER,
    TASK_MAPPER,
    TIMER_SETTINGS_MAPPER,
)


# ============================================================================
# Service Dependencies
# ============================================================================

def get_category_service(db: Session = Depends(get_db)) -> CrudService:
    """
    Get the CRUD service for categories.

    Args:
        db: Database session (automatically injected)

    Returns:
        CrudService: Category service bound to the request session

    Example:
        @router.get("/category/own")
        def list_categories(service: CrudService = Depends(get_category_service)):
            ...
    """
    from pomodoro.repositories import CategoryRepository
    return CrudService(CategoryRepository(db), CATEGORY_MAPPER)


def get_task_service(db: Session = Depends(get_db)) -> CrudService:
    """
    Get the CRUD service for tasks.

    Args:
        db: Database session (automatically injected)

    Returns:
        CrudService: Task service bound to the request session
    """
    from pomodoro.repositories import TaskRepository
    return CrudService(TaskRepository(db), TASK_MAPPER)


def get_schedule_service(db: Session = Depends(get_db)) -> CrudService:
    """
    Get the CRUD service for schedules.

    Args:
        db: Database session (automatically injected)

    Returns:
        CrudService: Schedule service bound to the request session
    """
    from pomodoro.repositories import ScheduleRepository
    return CrudService(ScheduleRepository(db), SCHEDULE_MAPPER)


def get_timer_settings_service(db: Session = Depends(get_db)) -> CrudService:
    """
    Get the CRUD service for timer settings.

    Args:
        db: Database session (automatically injected)

    Returns:
        CrudService: Timer settings service bound to the request session
    """
    from pomodoro.repositories import TimerSettingsRepository
    return CrudService(TimerSettingsRepository(db), TIMER_SETTINGS_MAPPER)
