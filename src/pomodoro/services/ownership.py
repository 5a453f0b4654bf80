"""Ownership predicate shared by every owned record kind."""

from typing import Optional
from uuid import UUID


def belongs_to(entity_owner_id: Optional[UUID], caller_id: UUID) -> bool:
    """True if the record owned by ``entity_owner_id`` belongs to the caller."""
    return entity_owner_id == caller_id
