"""
Task API
"""

from pomodoro.api.crud_router import build_crud_router
from pomodoro.core.dependencies import get_task_service
from pomodoro.schemas.task import TaskSchema

router = build_crud_router("task", TaskSchema, get_task_service, tags=["Task"])
