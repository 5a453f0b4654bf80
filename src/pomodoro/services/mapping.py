"""
Mapping between ORM entities and client-facing schemas.

Each owned kind has an explicit pair of functions:

- ``<kind>_to_schema(entity, map_owner=True)`` copies the fields of a stored
  entity into a schema and recurses into its owned collections. With
  ``map_owner=False`` the owner id is left empty.
- ``<kind>_to_entity(schema, user_id)`` builds a new, unsaved entity. The
  owner is always ``user_id``, whatever the schema says, and is stamped on
  every nested child as well. Nested collections are rebuilt from scratch.

The pairs are bundled into ``EntityMapper`` instances consumed by
``CrudService``.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Generic, Optional, TypeVar
from uuid import UUID

from pomodoro.models import AppTask, Category, Pomodoro, Schedule, TimerSettings
from pomodoro.models.base import OwnedMixin
from pomodoro.schemas import (
    CategorySchema,
    OwnedSchema,
    PomodoroSchema,
    ScheduleSchema,
    TaskSchema,
    TimerSettingsSchema,
)

EntityT = TypeVar("EntityT", bound=OwnedMixin)
SchemaT = TypeVar("SchemaT", bound=OwnedSchema)


@dataclass(frozen=True)
class EntityMapper(Generic[EntityT, SchemaT]):
    """
    Conversion functions for one owned kind.

    Attributes:
        kind: Short name used in routes and log records
        to_schema: Entity -> schema, ``map_owner`` controls the owner field
        to_entity: Schema + caller id -> new entity owned by the caller
    """
    kind: str
    to_schema: Callable[..., SchemaT]
    to_entity: Callable[[SchemaT, UUID], EntityT]


def assign_owner(entity: EntityT, user_id: UUID, entity_id: Optional[UUID] = None) -> EntityT:
    """
    Stamp the owner (and the id, when known) on a freshly built entity.

    Every ``*_to_entity`` function goes through here so the owner can only
    come from the caller id.
    """
    entity.app_user_id = user_id
    if entity_id is not None:
        entity.id = entity_id
    return entity


def _owner(entity: OwnedMixin, map_owner: bool) -> Optional[UUID]:
    return entity.app_user_id if map_owner else None


# ----------------------------------------------------------------------------
# Pomodoro
# ----------------------------------------------------------------------------

def pomodoro_to_schema(entity: Pomodoro, map_owner: bool = True) -> PomodoroSchema:
    return PomodoroSchema(
        id=entity.id,
        app_user_id=_owner(entity, map_owner),
        start_dt=entity.start_dt,
        duration=int(entity.duration.total_seconds()),
        comment=entity.comment,
        task_id=entity.task_id,
        timer_settings_id=entity.timer_settings_id,
    )


def pomodoro_to_entity(schema: PomodoroSchema, user_id: UUID, task_id: Optional[UUID] = None) -> Pomodoro:
    """``task_id`` of the owning task, when converted as part of it, wins over the schema's."""
    entity = Pomodoro(
        start_dt=schema.start_dt,
        duration=timedelta(seconds=schema.duration),
        comment=schema.comment,
        task_id=task_id if task_id is not None else schema.task_id,
        timer_settings_id=schema.timer_settings_id,
    )
    return assign_owner(entity, user_id, schema.id)


# ----------------------------------------------------------------------------
# Task
# ----------------------------------------------------------------------------

def task_to_schema(entity: AppTask, map_owner: bool = True) -> TaskSchema:
    return TaskSchema(
        id=entity.id,
        app_user_id=_owner(entity, map_owner),
        title=entity.title,
        description=entity.description,
        category_id=entity.category_id,
        timer_settings_id=entity.timer_settings_id,
        pomodoros=[pomodoro_to_schema(pomodoro, map_owner) for pomodoro in entity.pomodoros],
    )


def task_to_entity(schema: TaskSchema, user_id: UUID, category_id: Optional[UUID] = None) -> AppTask:
    entity = AppTask(
        title=schema.title,
        description=schema.description,
        category_id=category_id if category_id is not None else schema.category_id,
        timer_settings_id=schema.timer_settings_id,
        pomodoros=[pomodoro_to_entity(pomodoro, user_id, schema.id) for pomodoro in schema.pomodoros],
    )
    return assign_owner(entity, user_id, schema.id)


# ----------------------------------------------------------------------------
# Schedule
# ----------------------------------------------------------------------------

def schedule_to_schema(entity: Schedule, map_owner: bool = True) -> ScheduleSchema:
    return ScheduleSchema(
        id=entity.id,
        app_user_id=_owner(entity, map_owner),
        title=entity.title,
        description=entity.description,
        start_dt=entity.start_dt,
        finish_dt=entity.finish_dt,
        category_id=entity.category_id,
    )


def schedule_to_entity(schema: ScheduleSchema, user_id: UUID, category_id: Optional[UUID] = None) -> Schedule:
    entity = Schedule(
        title=schema.title,
        description=schema.description,
        start_dt=schema.start_dt,
        finish_dt=schema.finish_dt,
        category_id=category_id if category_id is not None else schema.category_id,
    )
    return assign_owner(entity, user_id, schema.id)


# ----------------------------------------------------------------------------
# Timer settings
# ----------------------------------------------------------------------------

def timer_settings_to_schema(entity: TimerSettings, map_owner: bool = True) -> TimerSettingsSchema:
    return TimerSettingsSchema(
        id=entity.id,
        app_user_id=_owner(entity, map_owner),
        name=entity.name,
        pomodoro=entity.pomodoro,
        short_break=entity.short_break,
        long_break=entity.long_break,
        pomodoros_before_long_break=entity.pomodoros_before_long_break,
    )


def timer_settings_to_entity(schema: TimerSettingsSchema, user_id: UUID) -> TimerSettings:
    entity = TimerSettings(
        name=schema.name,
        pomodoro=schema.pomodoro,
        short_break=schema.short_break,
        long_break=schema.long_break,
        pomodoros_before_long_break=schema.pomodoros_before_long_break,
    )
    return assign_owner(entity, user_id, schema.id)


# ----------------------------------------------------------------------------
# Category
# ----------------------------------------------------------------------------

def category_to_schema(entity: Category, map_owner: bool = True) -> CategorySchema:
    return CategorySchema(
        id=entity.id,
        app_user_id=_owner(entity, map_owner),
        name=entity.name,
        description=entity.description,
        schedules=[schedule_to_schema(schedule, map_owner) for schedule in entity.schedules],
        tasks=[task_to_schema(task, map_owner) for task in entity.tasks],
    )


def category_to_entity(schema: CategorySchema, user_id: UUID) -> Category:
    entity = Category(
        name=schema.name,
        description=schema.description,
        schedules=[schedule_to_entity(schedule, user_id, schema.id) for schedule in schema.schedules],
        tasks=[task_to_entity(task, user_id, schema.id) for task in schema.tasks],
    )
    return assign_owner(entity, user_id, schema.id)


CATEGORY_MAPPER = EntityMapper("category", category_to_schema, category_to_entity)
TASK_MAPPER = EntityMapper("task", task_to_schema, task_to_entity)
SCHEDULE_MAPPER = EntityMapper("schedule", schedule_to_schema, schedule_to_entity)
TIMER_SETTINGS_MAPPER = EntityMapper("timersettings", timer_settings_to_schema, timer_settings_to_entity)
