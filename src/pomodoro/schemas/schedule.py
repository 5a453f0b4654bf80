"""
Schedule Pydantic Schemas
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from pomodoro.core.constants import SCHEDULE_TITLE_MAX_LENGTH, SCHEDULE_DESCRIPTION_MAX_LENGTH
from pomodoro.schemas.common import OwnedSchema, to_utc_naive


class ScheduleSchema(OwnedSchema):
    """Planned time slot."""

    title: str = Field(..., min_length=1, max_length=SCHEDULE_TITLE_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=SCHEDULE_DESCRIPTION_MAX_LENGTH)
    start_dt: datetime
    finish_dt: datetime
    category_id: Optional[UUID] = None

    @field_validator("start_dt", "finish_dt")
    @classmethod
    def normalize_to_utc(cls, v):
        return to_utc_naive(v)

    @model_validator(mode="after")
    def validate_period(self):
        if self.finish_dt <= self.start_dt:
            raise ValueError("finish_dt must be later than start_dt")
        return self
