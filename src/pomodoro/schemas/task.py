"""
Task Pydantic Schemas
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from pomodoro.core.constants import TASK_TITLE_MAX_LENGTH, TASK_DESCRIPTION_MAX_LENGTH
from pomodoro.schemas.common import OwnedSchema
from pomodoro.schemas.pomodoro import PomodoroSchema


class TaskSchema(OwnedSchema):
    """Task with the pomodoros recorded for it."""

    title: str = Field(..., min_length=1, max_length=TASK_TITLE_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=TASK_DESCRIPTION_MAX_LENGTH)
    category_id: Optional[UUID] = None
    timer_settings_id: Optional[UUID] = None
    pomodoros: List[PomodoroSchema] = Field(default_factory=list)
