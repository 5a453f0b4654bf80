"""
Category API

Categories are returned with their tasks (and the tasks' pomodoros) and
schedules. Updating a category replaces those collections as a whole.
"""

from pomodoro.api.crud_router import build_crud_router
from pomodoro.core.dependencies import get_category_service
from pomodoro.schemas.category import CategorySchema

router = build_crud_router("category", CategorySchema, get_category_service, tags=["Category"])
