"""
Category Pydantic Schemas
"""

from typing import List, Optional

from pydantic import Field

from pomodoro.core.constants import CATEGORY_NAME_MAX_LENGTH, CATEGORY_DESCRIPTION_MAX_LENGTH
from pomodoro.schemas.common import OwnedSchema
from pomodoro.schemas.schedule import ScheduleSchema
from pomodoro.schemas.task import TaskSchema


class CategorySchema(OwnedSchema):
    """Category with its tasks and schedules."""

    name: str = Field(..., min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, max_length=CATEGORY_DESCRIPTION_MAX_LENGTH)
    schedules: List[ScheduleSchema] = Field(default_factory=list)
    tasks: List[TaskSchema] = Field(default_factory=list)
