"""
Base repository with owner-scoped CRUD operations.

This module provides a generic BaseRepository class that implements the
storage operations the service layer needs for any user-owned SQLAlchemy
model. All domain-specific repositories should extend this base class.

The repository never decides what a missing row means for the caller: it
returns rows, ``None`` or row counts and leaves the classification to the
service layer. Writes are refused with ``NotFoundException`` when the new
state points at a record the owner cannot see.
"""

from typing import Generic, TypeVar, Type, List, Optional, Sequence, Set, Tuple
from uuid import UUID

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, Query
from sqlalchemy.orm.interfaces import LoaderOption, MANYTOONE

from pomodoro.models.base import Base
from pomodoro.core.exceptions import DatabaseException, DuplicateException, NotFoundException


# Generic type bound to SQLAlchemy Base
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository with owner-scoped CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model type this repository manages. It must
            have ``id`` and ``app_user_id`` columns (see ``OwnedMixin``).

    Example:
        class CategoryRepository(BaseRepository[Category]):
            loader_options = (selectinload(Category.tasks),)

            def __init__(self, db: Session):
                super().__init__(Category, db)
    """

    # Eager-loading options applied to every read, e.g. nested collections
    loader_options: Sequence[LoaderOption] = ()

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: SQLAlchemy database session
        """
        self.model = model
        self.db = db

    def _query(self) -> Query:
        return self.db.query(self.model).options(*self.loader_options)

    def get(self, id: UUID) -> Optional[ModelType]:
        """
        Get a single record by ID regardless of its owner.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        try:
            return self._query().filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to get {self.model.__name__} with id {id}") from e

    def list_for_owner(self, owner_id: UUID) -> List[ModelType]:
        """
        Get all records belonging to a user.

        Args:
            owner_id: Id of the owning user

        Returns:
            List of model instances, empty if the user owns none
        """
        try:
            return self._query().filter(self.model.app_user_id == owner_id).all()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to list {self.model.__name__} for owner {owner_id}") from e

    def find_if_owned(self, id: UUID, owner_id: UUID) -> Optional[ModelType]:
        """
        Get a record only if it exists and belongs to the user.

        A record owned by somebody else and a missing record both give None.

        Args:
            id: Primary key value
            owner_id: Id of the expected owner

        Returns:
            Model instance or None
        """
        try:
            return self._query().filter(
                self.model.id == id,
                self.model.app_user_id == owner_id,
            ).first()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to get {self.model.__name__} with id {id}") from e

    def insert(self, obj: ModelType) -> ModelType:
        """
        Persist a new record together with its nested children.

        Every record the new graph points at (a parent category, timer
        settings) must already exist and belong to ``obj.app_user_id``.

        Args:
            obj: Model instance to create; ``id`` is generated when absent

        Returns:
            Created model instance with ID populated

        Raises:
            NotFoundException: If a referenced record is missing or owned by someone else
            DuplicateException: If a record in the graph reuses an existing id
            DatabaseException: On any other storage failure
        """
        requested = [(type(node), node.id) for node in self._owned_graph(obj) if node.id is not None]
        try:
            self._require_owned_references(obj, obj.app_user_id)
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return obj
        except IntegrityError as e:
            self.db.rollback()
            for node_type, node_id in requested:
                if self.db.get(node_type, node_id) is not None:
                    raise DuplicateException(node_type.__name__, "id", node_id) from e
            raise DatabaseException(f"Failed to create {self.model.__name__}: constraint violation") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to create {self.model.__name__}") from e

    def update_owned(self, obj: ModelType) -> bool:
        """
        Replace an existing record owned by ``obj.app_user_id``.

        Scalar fields are overwritten and owned collections are replaced
        wholesale: children missing from ``obj`` are deleted. The update is
        refused when the record does not exist for this owner, or when any
        nested child id already exists under a different owner.

        Args:
            obj: Detached model instance carrying the new state

        Returns:
            True if updated, False if no such record for this owner

        Raises:
            NotFoundException: If a referenced record is missing or owned by someone else
            DatabaseException: On storage failure
        """
        try:
            if self.find_if_owned(obj.id, obj.app_user_id) is None:
                return False
            if self._foreign_children(obj, obj.app_user_id):
                return False
            self._require_owned_references(obj, obj.app_user_id)

            self.db.merge(obj)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to update {self.model.__name__}") from e

    def delete_if_owned(self, id: UUID, owner_id: UUID) -> int:
        """
        Delete a record if it belongs to the user.

        Owned children are removed with it through ORM cascades.

        Args:
            id: Primary key value
            owner_id: Id of the expected owner

        Returns:
            Number of deleted records, 0 or 1
        """
        try:
            obj = self.find_if_owned(id, owner_id)
            if obj is None:
                return 0

            self.db.delete(obj)
            self.db.commit()
            return 1
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to delete {self.model.__name__} by id") from e

    @staticmethod
    def _owned_graph(obj: Base) -> List[Base]:
        """``obj`` followed by every child reachable through owned collections."""
        graph: List[Base] = []
        seen: Set[int] = set()
        pending = [obj]

        while pending:
            current = pending.pop()
            if id(current) in seen:
                continue
            seen.add(id(current))
            graph.append(current)

            state = inspect(current)
            for rel in state.mapper.relationships:
                if rel.uselist and rel.cascade.delete_orphan:
                    pending.extend(state.dict.get(rel.key) or [])

        return graph

    def _foreign_children(self, obj: Base, owner_id: UUID) -> List[Tuple[str, UUID]]:
        """Ids of nested children that already exist under another owner."""
        foreign: List[Tuple[str, UUID]] = []
        for child in self._owned_graph(obj)[1:]:
            if child.id is None:
                continue
            existing = self.db.get(type(child), child.id)
            if existing is not None and existing.app_user_id != owner_id:
                foreign.append((type(child).__name__, child.id))
        return foreign

    def _require_owned_references(self, obj: Base, owner_id: UUID) -> None:
        """
        Check every many-to-one reference in the graph of ``obj``.

        References to records inside the graph itself (a task pointing at the
        category it is nested in) are skipped; any other referenced record
        must exist and belong to ``owner_id``.
        """
        graph = self._owned_graph(obj)
        written = {node.id for node in graph if node.id is not None}

        for node in graph:
            state = inspect(node)
            for rel in state.mapper.relationships:
                if rel.direction is not MANYTOONE:
                    continue
                for column in rel.local_columns:
                    ref_id = state.dict.get(state.mapper.get_property_by_column(column).key)
                    if ref_id is None or ref_id in written:
                        continue
                    target = self.db.get(rel.mapper.class_, ref_id)
                    if target is None or target.app_user_id != owner_id:
                        raise NotFoundException(rel.mapper.class_.__name__, ref_id)
