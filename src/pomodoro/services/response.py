"""
Service response types.

Every CRUD service operation returns a ServiceResponse: a status tag from a
closed set plus an optional payload or message. The API layer turns the tag
into an HTTP status in one place (see ``pomodoro.api.responses``).
"""

import enum
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ResponseType(enum.Enum):
    """
    Outcome of a service operation.

    Attributes:
        OK: Operation succeeded, payload may be attached
        NO_CONTENT: Operation succeeded, nothing to return
        NOT_FOUND: Requested record does not exist
        FORBIDDEN: Record exists but belongs to another user
        ERROR: Request rejected, message explains why
        CONFLICT: Storage reported a uniqueness violation, message explains why
    """
    OK = "ok"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    ERROR = "error"
    CONFLICT = "conflict"


_MESSAGE_TYPES = {ResponseType.ERROR, ResponseType.CONFLICT}


@dataclass(frozen=True)
class ServiceResponse(Generic[T]):
    """
    Tagged result of a service operation.

    Attributes:
        result: Status tag
        data: Payload, only allowed with ``ResponseType.OK``
        message: Human-readable reason, only allowed with ERROR and CONFLICT
    """
    result: ResponseType
    data: Optional[T] = None
    message: Optional[str] = None

    def __post_init__(self):
        if self.data is not None and self.result is not ResponseType.OK:
            raise ValueError(f"{self.result.name} response cannot carry data")
        if self.message is not None and self.result not in _MESSAGE_TYPES:
            raise ValueError(f"{self.result.name} response cannot carry a message")

    @classmethod
    def ok(cls, data: Any = None) -> "ServiceResponse":
        return cls(ResponseType.OK, data=data)

    @classmethod
    def no_content(cls) -> "ServiceResponse":
        return cls(ResponseType.NO_CONTENT)

    @classmethod
    def not_found(cls) -> "ServiceResponse":
        return cls(ResponseType.NOT_FOUND)

    @classmethod
    def forbidden(cls) -> "ServiceResponse":
        return cls(ResponseType.FORBIDDEN)

    @classmethod
    def error(cls, message: str) -> "ServiceResponse":
        return cls(ResponseType.ERROR, message=message)

    @classmethod
    def conflict(cls, message: str) -> "ServiceResponse":
        return cls(ResponseType.CONFLICT, message=message)
