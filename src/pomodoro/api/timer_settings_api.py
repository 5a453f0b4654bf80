"""
Timer Settings API
"""

from pomodoro.api.crud_router import build_crud_router
from pomodoro.core.dependencies import get_timer_settings_service
from pomodoro.schemas.timer_settings import TimerSettingsSchema

router = build_crud_router("timersettings", TimerSettingsSchema, get_timer_settings_service, tags=["Timer Settings"])
