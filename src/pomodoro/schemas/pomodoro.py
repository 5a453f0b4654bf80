"""
Pomodoro Pydantic Schemas
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from pomodoro.core.constants import POMODORO_COMMENT_MAX_LENGTH
from pomodoro.schemas.common import OwnedSchema, to_utc_naive


class PomodoroSchema(OwnedSchema):
    """One recorded work interval; ``duration`` is in seconds, ``start_dt`` is stored as UTC."""

    start_dt: datetime
    duration: int = Field(..., ge=1)
    comment: Optional[str] = Field(None, max_length=POMODORO_COMMENT_MAX_LENGTH)
    task_id: Optional[UUID] = None
    timer_settings_id: Optional[UUID] = None

    @field_validator("start_dt")
    @classmethod
    def normalize_to_utc(cls, v):
        return to_utc_naive(v)
