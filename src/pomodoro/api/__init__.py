"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- category_api, task_api, schedule_api, timer_settings_api: owner-scoped CRUD
- health_api: Health check endpoint

The CRUD routers are all produced by ``crud_router.build_crud_router``.
"""

from .category_api import router as category_router
from .task_api import router as task_router
from .schedule_api import router as schedule_router
from .timer_settings_api import router as timer_settings_router
from .health_api import health_api_router

__all__ = [
    "category_router",
    "task_router",
    "schedule_router",
    "timer_settings_router",
    "health_api_router",
]
