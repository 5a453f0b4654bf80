"""
Generic CRUD Service

Orchestrates owner-scoped create/read/update/delete for any owned kind.
One instance is composed per kind from a repository and an EntityMapper;
there are no per-kind subclasses.

This is the only place where repository results and exceptions are turned
into ServiceResponse statuses, so every kind reports 404/403/400/409 the
same way.
"""

import logging
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from pomodoro.core.exceptions import ApplicationException, DuplicateException, NotFoundException
from pomodoro.repositories.base import BaseRepository
from pomodoro.schemas.common import OwnedSchema
from pomodoro.services.mapping import EntityMapper
from pomodoro.services.ownership import belongs_to
from pomodoro.services.response import ServiceResponse

EntityT = TypeVar("EntityT")
SchemaT = TypeVar("SchemaT", bound=OwnedSchema)

NO_OBJECT_MESSAGE = "no object with such id for this user"
GENERIC_ERROR_MESSAGE = "failed to process request"


class CrudService(Generic[EntityT, SchemaT]):
    """
    Owner-scoped CRUD operations for one kind of record.

    Args:
        repository: Store access bound to the kind's model
        mapper: Entity/schema conversions for the kind
        service_name: Logger name (defaults to ``CRUD_SERVICE.<kind>``)
    """

    def __init__(
        self,
        repository: BaseRepository,
        mapper: EntityMapper,
        service_name: Optional[str] = None,
    ):
        self.repository = repository
        self.mapper = mapper
        self.service_name = service_name or f"CRUD_SERVICE.{mapper.kind}"
        self.logger = logging.getLogger(self.service_name)

    def get_own_all(self, caller_id: UUID) -> ServiceResponse[List[SchemaT]]:
        """
        List every record the caller owns.

        Returns:
            OK with a list, empty when the caller owns nothing
        """
        try:
            entities = self.repository.list_for_owner(caller_id)
        except ApplicationException as e:
            return self._storage_error("get_own_all", e)

        return ServiceResponse.ok([self.mapper.to_schema(entity, True) for entity in entities])

    def get_own_by_id(self, id: UUID, caller_id: UUID) -> ServiceResponse[SchemaT]:
        """
        Fetch one record, telling a missing record apart from somebody else's.

        Returns:
            NOT_FOUND if no record has this id, FORBIDDEN if it belongs to
            another user, otherwise OK with the record
        """
        try:
            entity = self.repository.get(id)
        except ApplicationException as e:
            return self._storage_error("get_own_by_id", e)

        if entity is None:
            return ServiceResponse.not_found()
        if not belongs_to(entity.app_user_id, caller_id):
            self.logger.warning(f"User {caller_id} requested {self.mapper.kind} {id} owned by another user")
            return ServiceResponse.forbidden()

        return ServiceResponse.ok(self.mapper.to_schema(entity, True))

    def add_one_own(self, schema: SchemaT, caller_id: UUID) -> ServiceResponse[SchemaT]:
        """
        Create a record owned by the caller.

        Any owner id in ``schema`` is ignored. Categories or timer settings the
        record points at must belong to the caller.

        Returns:
            OK with the stored record (including its generated id),
            CONFLICT if the id is already taken, ERROR on other failures
        """
        entity = self.mapper.to_entity(schema, caller_id)
        try:
            created = self.repository.insert(entity)
        except NotFoundException as e:
            return self._rejected_reference("add_one_own", caller_id, e)
        except DuplicateException as e:
            self.logger.warning(f"Rejected {self.mapper.kind} insert for user {caller_id}: {e.message}")
            return ServiceResponse.conflict(e.message)
        except ApplicationException as e:
            return self._storage_error("add_one_own", e)

        self.logger.info(f"Created {self.mapper.kind} {created.id} for user {caller_id}")
        return ServiceResponse.ok(self.mapper.to_schema(created, True))

    def update_one_own(self, schema: SchemaT, caller_id: UUID) -> ServiceResponse:
        """
        Replace a record the caller owns.

        A record that is missing or owned by someone else is reported as
        ERROR rather than NOT_FOUND/FORBIDDEN, and so is a reference to a
        category or timer settings the caller does not own.

        Returns:
            OK with the submitted record, owned by the caller throughout,
            on success; ERROR otherwise
        """
        entity = self.mapper.to_entity(schema, caller_id)
        try:
            updated = self.repository.update_owned(entity)
        except NotFoundException as e:
            return self._rejected_reference("update_one_own", caller_id, e)
        except ApplicationException as e:
            return self._storage_error("update_one_own", e)

        if not updated:
            return ServiceResponse.error(NO_OBJECT_MESSAGE)
        return ServiceResponse.ok(self.mapper.to_schema(entity, True))

    def delete_one_own(self, id: UUID, caller_id: UUID) -> ServiceResponse:
        """
        Delete a record the caller owns.

        Returns:
            NO_CONTENT on success, ERROR if nothing was deleted
        """
        try:
            deleted = self.repository.delete_if_owned(id, caller_id)
        except ApplicationException as e:
            return self._storage_error("delete_one_own", e)

        if deleted == 0:
            return ServiceResponse.error(NO_OBJECT_MESSAGE)

        self.logger.info(f"Deleted {self.mapper.kind} {id} for user {caller_id}")
        return ServiceResponse.no_content()

    def _rejected_reference(self, operation: str, caller_id: UUID, error: NotFoundException) -> ServiceResponse:
        self.logger.warning(f"Rejected {self.mapper.kind} {operation} for user {caller_id}: {error.message}")
        return ServiceResponse.error(error.message)

    def _storage_error(self, operation: str, error: ApplicationException) -> ServiceResponse:
        self.logger.error(f"Error in {operation}: {error.message}", exc_info=True)
        return ServiceResponse.error(GENERIC_ERROR_MESSAGE)
