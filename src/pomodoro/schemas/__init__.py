"""
Pydantic schemas package.

This package contains the client-facing representations of owned records,
organized by domain:
- category: Categories with nested tasks and schedules
- task: Tasks with nested pomodoros
- schedule, timer_settings, pomodoro: Flat representations
- common: Shared base fields, error and health check responses

Usage:
    from pomodoro.schemas import CategorySchema, TaskSchema
"""

from pomodoro.schemas.common import OwnedSchema, DetailResponse, HealthCheckResponse
from pomodoro.schemas.pomodoro import PomodoroSchema
from pomodoro.schemas.task import TaskSchema
from pomodoro.schemas.schedule import ScheduleSchema
from pomodoro.schemas.timer_settings import TimerSettingsSchema
from pomodoro.schemas.category import CategorySchema

__all__ = [
    "OwnedSchema",
    "DetailResponse",
    "HealthCheckResponse",
    "PomodoroSchema",
    "TaskSchema",
    "ScheduleSchema",
    "TimerSettingsSchema",
    "CategorySchema",
]
