"""
Timer Settings Pydantic Schemas

All durations are in minutes.
"""

from typing import Optional

from pydantic import Field

from pomodoro.core.constants import (
    TIMER_SETTINGS_NAME_MAX_LENGTH,
    POMODORO_MAX_MINUTES,
    SHORT_BREAK_MAX_MINUTES,
    LONG_BREAK_MAX_MINUTES,
    POMODOROS_BEFORE_LONG_BREAK_MAX,
)
from pomodoro.schemas.common import OwnedSchema


class TimerSettingsSchema(OwnedSchema):
    """Work and break lengths."""

    name: Optional[str] = Field(None, max_length=TIMER_SETTINGS_NAME_MAX_LENGTH)
    pomodoro: int = Field(25, ge=1, le=POMODORO_MAX_MINUTES)
    short_break: int = Field(5, ge=1, le=SHORT_BREAK_MAX_MINUTES)
    long_break: int = Field(15, ge=1, le=LONG_BREAK_MAX_MINUTES)
    pomodoros_before_long_break: int = Field(4, ge=1, le=POMODOROS_BEFORE_LONG_BREAK_MAX)
