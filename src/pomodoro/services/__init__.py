"""
Service layer.

``CrudService`` holds the owner-scoped CRUD logic shared by every kind;
``mapping`` converts between ORM entities and schemas; ``response`` defines
the status vocabulary services report with.
"""

from pomodoro.services.crud_service import CrudService
from pomodoro.services.ownership import belongs_to
from pomodoro.services.response import ResponseType, ServiceResponse

__all__ = [
    "CrudService",
    "belongs_to",
    "ResponseType",
    "ServiceResponse",
]
