"""
Common/shared Pydantic schemas.

This module contains reusable schemas used across the application:
- Base fields of every owned representation
- UTC normalisation of client timestamps
- Error and health check responses
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field


def to_utc_naive(value: datetime) -> datetime:
    """
    Convert an aware datetime to naive UTC, the form timestamps are stored in.

    Naive values are taken to be UTC already and returned unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class OwnedSchema(BaseModel):
    """
    Fields shared by every owned representation.

    ``app_user_id`` is filled by the server. Values sent by clients are
    ignored when the representation is turned back into an entity.
    """

    id: Optional[UUID] = None
    app_user_id: Optional[UUID] = None


class DetailResponse(BaseModel):
    """Body of 400 and 409 responses."""
    detail: str


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    database: Dict[str, Any]
    timestamp: datetime = Field(default_factory=datetime.utcnow)
