"""
Schedule API
"""

from pomodoro.api.crud_router import build_crud_router
from pomodoro.core.dependencies import get_schedule_service
from pomodoro.schemas.schedule import ScheduleSchema

router = build_crud_router("schedule", ScheduleSchema, get_schedule_service, tags=["Schedule"])
