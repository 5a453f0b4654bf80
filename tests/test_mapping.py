"""
Unit tests for entity/schema mapping.
"""

import uuid
from datetime import datetime, timedelta

import pytest

from pomodoro.models import AppTask, Category, Pomodoro
from pomodoro.schemas import (
    CategorySchema,
    PomodoroSchema,
    ScheduleSchema,
    TaskSchema,
    TimerSettingsSchema,
)
from pomodoro.services.mapping import (
    assign_owner,
    category_to_entity,
    category_to_schema,
    task_to_entity,
    task_to_schema,
    timer_settings_to_entity,
    timer_settings_to_schema,
)


@pytest.fixture
def category_schema():
    """Client-submitted category with nested tasks, pomodoros and schedules."""
    category_id = uuid.uuid4()
    task_id = uuid.uuid4()
    return CategorySchema(
        id=category_id,
        name="Work",
        description="Day job",
        app_user_id=uuid.uuid4(),
        tasks=[
            TaskSchema(
                id=task_id,
                title="Report",
                category_id=category_id,
                app_user_id=uuid.uuid4(),
                pomodoros=[
                    PomodoroSchema(
                        id=uuid.uuid4(),
                        start_dt=datetime(2024, 3, 1, 9, 0),
                        duration=1500,
                        comment="focused",
                        task_id=task_id,
                    ),
                ],
            ),
            TaskSchema(id=uuid.uuid4(), title="Email", category_id=category_id),
        ],
        schedules=[
            ScheduleSchema(
                id=uuid.uuid4(),
                title="Standup",
                start_dt=datetime(2024, 3, 1, 10, 0),
                finish_dt=datetime(2024, 3, 1, 10, 15),
                category_id=category_id,
            ),
        ],
    )


class TestToEntity:
    """Test schema -> entity conversion."""

    def test_owner_comes_from_caller(self, category_schema):
        caller = uuid.uuid4()
        entity = category_to_entity(category_schema, caller)

        assert entity.app_user_id == caller
        assert entity.app_user_id != category_schema.app_user_id

    def test_owner_is_inherited_by_every_child(self, category_schema):
        caller = uuid.uuid4()
        entity = category_to_entity(category_schema, caller)

        assert all(task.app_user_id == caller for task in entity.tasks)
        assert all(schedule.app_user_id == caller for schedule in entity.schedules)
        assert entity.tasks[0].pomodoros[0].app_user_id == caller

    def test_children_point_at_parent(self, category_schema):
        entity = category_to_entity(category_schema, uuid.uuid4())

        assert all(task.category_id == category_schema.id for task in entity.tasks)
        assert entity.tasks[0].pomodoros[0].task_id == category_schema.tasks[0].id

    def test_missing_collections_become_empty(self):
        entity = category_to_entity(CategorySchema(name="Empty"), uuid.uuid4())

        assert entity.tasks == []
        assert entity.schedules == []

    def test_duration_becomes_timedelta(self, category_schema):
        entity = category_to_entity(category_schema, uuid.uuid4())
        assert entity.tasks[0].pomodoros[0].duration == timedelta(seconds=1500)

    def test_id_left_unset_when_absent(self):
        entity = timer_settings_to_entity(TimerSettingsSchema(), uuid.uuid4())
        assert entity.id is None


class TestToSchema:
    """Test entity -> schema conversion."""

    def test_owner_mapped_by_default(self):
        owner = uuid.uuid4()
        entity = assign_owner(Category(name="Home", tasks=[], schedules=[]), owner, uuid.uuid4())

        assert category_to_schema(entity).app_user_id == owner

    def test_owner_scrubbed_when_not_mapped(self):
        owner = uuid.uuid4()
        pomodoro = assign_owner(
            Pomodoro(start_dt=datetime(2024, 1, 1), duration=timedelta(minutes=25)),
            owner,
        )
        task = assign_owner(AppTask(title="Read", pomodoros=[pomodoro]), owner, uuid.uuid4())

        schema = task_to_schema(task, map_owner=False)

        assert schema.app_user_id is None
        assert schema.pomodoros[0].app_user_id is None
        assert schema.pomodoros[0].duration == 1500

    def test_nested_collections_are_rebuilt(self):
        owner = uuid.uuid4()
        first = task_to_schema(task_to_entity(TaskSchema(title="A"), owner))
        second = task_to_schema(task_to_entity(TaskSchema(title="B"), owner))

        assert first.pomodoros is not second.pomodoros


class TestRoundTrip:
    """to_schema(to_entity(r, u)) reproduces r with the owner filled in."""

    def test_category_round_trip(self, category_schema):
        caller = uuid.uuid4()
        result = category_to_schema(category_to_entity(category_schema, caller), True)

        assert result.id == category_schema.id
        assert result.name == category_schema.name
        assert result.description == category_schema.description
        assert result.app_user_id == caller
        assert len(result.tasks) == len(category_schema.tasks)
        assert len(result.schedules) == len(category_schema.schedules)
        assert len(result.tasks[0].pomodoros) == 1

    def test_nested_scalars_survive(self, category_schema):
        caller = uuid.uuid4()
        result = category_to_schema(category_to_entity(category_schema, caller), True)

        expected_task = category_schema.tasks[0].model_copy(
            update={
                "app_user_id": caller,
                "pomodoros": [category_schema.tasks[0].pomodoros[0].model_copy(update={"app_user_id": caller})],
            }
        )
        assert result.tasks[0] == expected_task
        assert result.schedules[0] == category_schema.schedules[0].model_copy(update={"app_user_id": caller})

    def test_timer_settings_round_trip(self):
        caller = uuid.uuid4()
        schema = TimerSettingsSchema(
            id=uuid.uuid4(),
            name="Deep work",
            pomodoro=50,
            short_break=10,
            long_break=30,
            pomodoros_before_long_break=3,
        )

        result = timer_settings_to_schema(timer_settings_to_entity(schema, caller))

        assert result == schema.model_copy(update={"app_user_id": caller})
