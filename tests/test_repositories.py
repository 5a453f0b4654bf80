"""
Tests for owner-scoped repositories against an in-memory SQLite database.
"""

import uuid
from datetime import datetime

import pytest

from pomodoro.core.exceptions import DatabaseException, DuplicateException, NotFoundException
from pomodoro.models import AppTask, Category, Pomodoro, Schedule
from pomodoro.repositories import CategoryRepository, TaskRepository, TimerSettingsRepository
from pomodoro.schemas import CategorySchema, PomodoroSchema, ScheduleSchema, TaskSchema, TimerSettingsSchema
from pomodoro.services.mapping import assign_owner, category_to_entity, task_to_entity, timer_settings_to_entity


def _category(owner, name="Work", tasks=None, schedules=None, id=None):
    schema = CategorySchema(id=id, name=name, tasks=tasks or [], schedules=schedules or [])
    return category_to_entity(schema, owner)


@pytest.fixture
def categories(db):
    return CategoryRepository(db)


class TestReads:
    """Test owner-scoped and unscoped lookups."""

    def test_list_for_owner_returns_only_own_records(self, categories, user_a, user_b):
        categories.insert(_category(user_a, "Work"))
        categories.insert(_category(user_a, "Home"))
        categories.insert(_category(user_b, "Other"))

        names = {category.name for category in categories.list_for_owner(user_a)}

        assert names == {"Work", "Home"}

    def test_list_for_owner_empty(self, categories, user_a):
        assert categories.list_for_owner(user_a) == []

    def test_get_ignores_owner(self, categories, user_a):
        created = categories.insert(_category(user_a))

        found = categories.get(created.id)

        assert found is not None
        assert found.app_user_id == user_a

    def test_get_missing(self, categories):
        assert categories.get(uuid.uuid4()) is None

    def test_find_if_owned(self, categories, user_a, user_b):
        created = categories.insert(_category(user_a))

        assert categories.find_if_owned(created.id, user_a) is not None
        assert categories.find_if_owned(created.id, user_b) is None
        assert categories.find_if_owned(uuid.uuid4(), user_a) is None

    def test_nested_collections_loaded(self, categories, user_a):
        task_id = uuid.uuid4()
        created = categories.insert(_category(
            user_a,
            tasks=[TaskSchema(
                id=task_id,
                title="Report",
                pomodoros=[PomodoroSchema(start_dt=datetime(2024, 3, 1, 9, 0), duration=1500)],
            )],
            schedules=[ScheduleSchema(
                title="Standup",
                start_dt=datetime(2024, 3, 1, 10, 0),
                finish_dt=datetime(2024, 3, 1, 10, 15),
            )],
        ))
        categories.db.expunge_all()

        found = categories.get(created.id)

        assert [task.id for task in found.tasks] == [task_id]
        assert found.tasks[0].category_id == created.id
        assert len(found.tasks[0].pomodoros) == 1
        assert found.tasks[0].pomodoros[0].app_user_id == user_a
        assert found.schedules[0].title == "Standup"


class TestInsert:
    """Test record creation."""

    def test_insert_generates_id(self, db, user_a):
        repository = TimerSettingsRepository(db)

        created = repository.insert(timer_settings_to_entity(TimerSettingsSchema(name="Default"), user_a))

        assert created.id is not None
        assert created.pomodoro == 25

    def test_insert_keeps_supplied_id(self, categories, user_a):
        category_id = uuid.uuid4()
        created = categories.insert(_category(user_a, id=category_id))
        assert created.id == category_id

    def test_insert_duplicate_id(self, categories, user_a, user_b):
        category_id = uuid.uuid4()
        categories.insert(_category(user_a, id=category_id))
        categories.db.expunge_all()

        with pytest.raises(DuplicateException) as exc_info:
            categories.insert(_category(user_b, "Copy", id=category_id))

        assert str(category_id) in exc_info.value.message
        # Session is usable again after the rollback
        assert categories.get(category_id).app_user_id == user_a

    def test_insert_duplicate_nested_child_id(self, db, categories, user_a):
        task = TaskSchema(id=uuid.uuid4(), title="Report")
        categories.insert(_category(user_a, "Work", tasks=[task]))
        db.expunge_all()

        with pytest.raises(DuplicateException) as exc_info:
            categories.insert(_category(user_a, "Copy", tasks=[task]))

        assert exc_info.value.message == f"AppTask already exists with id: {task.id}"
        assert db.query(Category).count() == 1

    def test_insert_missing_required_column(self, db, categories, user_a):
        with pytest.raises(DatabaseException) as exc_info:
            categories.insert(assign_owner(Category(), user_a))

        assert not isinstance(exc_info.value, DuplicateException)
        assert "constraint violation" in exc_info.value.message

    def test_insert_dangling_foreign_key(self, db, user_a, monkeypatch):
        repository = TaskRepository(db)
        monkeypatch.setattr(repository, "_require_owned_references", lambda obj, owner_id: None)

        with pytest.raises(DatabaseException) as exc_info:
            repository.insert(task_to_entity(TaskSchema(title="x", category_id=uuid.uuid4()), user_a))

        assert not isinstance(exc_info.value, DuplicateException)
        assert db.query(AppTask).count() == 0

    def test_insert_reference_to_other_users_category(self, db, categories, user_a, user_b):
        theirs = categories.insert(_category(user_b, "Theirs"))
        repository = TaskRepository(db)

        with pytest.raises(NotFoundException) as exc_info:
            repository.insert(task_to_entity(TaskSchema(title="x", category_id=theirs.id), user_a))

        assert exc_info.value.details == {"resource": "Category", "identifier": theirs.id}
        assert db.query(AppTask).count() == 0

    def test_insert_reference_to_missing_timer_settings(self, db, user_a):
        repository = TaskRepository(db)
        schema = TaskSchema(title="x", timer_settings_id=uuid.uuid4())

        with pytest.raises(NotFoundException):
            repository.insert(task_to_entity(schema, user_a))

    def test_insert_nested_reference_checked(self, db, categories, user_a, user_b):
        theirs = TimerSettingsRepository(db).insert(timer_settings_to_entity(TimerSettingsSchema(), user_b))

        with pytest.raises(NotFoundException):
            categories.insert(_category(user_a, tasks=[TaskSchema(title="x", timer_settings_id=theirs.id)]))

    def test_insert_reference_to_own_records(self, db, categories, user_a):
        mine = categories.insert(_category(user_a, "Mine"))
        settings = TimerSettingsRepository(db).insert(timer_settings_to_entity(TimerSettingsSchema(), user_a))

        created = TaskRepository(db).insert(task_to_entity(
            TaskSchema(title="x", category_id=mine.id, timer_settings_id=settings.id),
            user_a,
        ))

        assert created.category_id == mine.id
        assert created.timer_settings_id == settings.id

    def test_insert_task_with_pomodoros(self, db, user_a):
        repository = TaskRepository(db)
        schema = TaskSchema(
            id=uuid.uuid4(),
            title="Read",
            pomodoros=[
                PomodoroSchema(start_dt=datetime(2024, 3, 1, 9, 0), duration=1500),
                PomodoroSchema(start_dt=datetime(2024, 3, 1, 9, 30), duration=1500),
            ],
        )

        created = repository.insert(task_to_entity(schema, user_a))

        assert len(created.pomodoros) == 2
        assert all(pomodoro.task_id == created.id for pomodoro in created.pomodoros)


class TestUpdate:
    """Test owner-scoped replacement."""

    def test_update_scalar_fields(self, categories, user_a):
        category_id = uuid.uuid4()
        categories.insert(_category(user_a, "Work", id=category_id))
        categories.db.expunge_all()

        updated = categories.update_owned(_category(user_a, "Job", id=category_id))

        assert updated is True
        categories.db.expunge_all()
        assert categories.get(category_id).name == "Job"

    def test_update_missing_record(self, categories, user_a):
        assert categories.update_owned(_category(user_a, id=uuid.uuid4())) is False

    def test_update_other_users_record(self, categories, user_a, user_b):
        category_id = uuid.uuid4()
        categories.insert(_category(user_a, "Work", id=category_id))
        categories.db.expunge_all()

        assert categories.update_owned(_category(user_b, "Stolen", id=category_id)) is False

        categories.db.expunge_all()
        found = categories.get(category_id)
        assert found.name == "Work"
        assert found.app_user_id == user_a

    def test_update_replaces_nested_collection(self, db, categories, user_a):
        category_id = uuid.uuid4()
        kept = TaskSchema(id=uuid.uuid4(), title="Kept")
        dropped = TaskSchema(id=uuid.uuid4(), title="Dropped")
        categories.insert(_category(user_a, id=category_id, tasks=[kept, dropped]))
        db.expunge_all()

        added = TaskSchema(id=uuid.uuid4(), title="Added")
        assert categories.update_owned(_category(user_a, id=category_id, tasks=[kept, added])) is True

        db.expunge_all()
        titles = {task.title for task in categories.get(category_id).tasks}
        assert titles == {"Kept", "Added"}
        assert db.query(AppTask).count() == 2
        assert db.get(AppTask, dropped.id) is None

    def test_update_clears_nested_collection(self, db, categories, user_a):
        category_id = uuid.uuid4()
        categories.insert(_category(
            user_a,
            id=category_id,
            schedules=[ScheduleSchema(
                title="Standup",
                start_dt=datetime(2024, 3, 1, 10, 0),
                finish_dt=datetime(2024, 3, 1, 10, 15),
            )],
        ))
        db.expunge_all()

        assert categories.update_owned(_category(user_a, id=category_id)) is True

        db.expunge_all()
        assert db.query(Schedule).count() == 0

    def test_update_refuses_foreign_nested_child(self, db, categories, user_a, user_b):
        foreign_task = TaskSchema(id=uuid.uuid4(), title="Theirs")
        categories.insert(_category(user_b, "Other", tasks=[foreign_task]))
        category_id = uuid.uuid4()
        categories.insert(_category(user_a, id=category_id))
        db.expunge_all()

        hijacked = TaskSchema(id=foreign_task.id, title="Mine now")
        assert categories.update_owned(_category(user_a, id=category_id, tasks=[hijacked])) is False

        db.expunge_all()
        task = db.get(AppTask, foreign_task.id)
        assert task.title == "Theirs"
        assert task.app_user_id == user_b


    def test_update_reference_to_other_users_category(self, db, categories, user_a, user_b):
        theirs = categories.insert(_category(user_b, "Theirs"))
        repository = TaskRepository(db)
        task_id = repository.insert(task_to_entity(TaskSchema(title="Mine"), user_a)).id
        db.expunge_all()

        with pytest.raises(NotFoundException):
            repository.update_owned(task_to_entity(
                TaskSchema(id=task_id, title="Moved", category_id=theirs.id),
                user_a,
            ))

        db.expunge_all()
        task = db.get(AppTask, task_id)
        assert task.title == "Mine"
        assert task.category_id is None


class TestDelete:
    """Test owner-scoped deletion."""

    def test_delete_own_record(self, db, categories, user_a):
        created = categories.insert(_category(
            user_a,
            tasks=[TaskSchema(
                title="Report",
                pomodoros=[PomodoroSchema(start_dt=datetime(2024, 3, 1, 9, 0), duration=1500)],
            )],
        ))

        assert categories.delete_if_owned(created.id, user_a) == 1

        assert db.query(Category).count() == 0
        assert db.query(AppTask).count() == 0
        assert db.query(Pomodoro).count() == 0

    def test_delete_other_users_record(self, categories, user_a, user_b):
        created = categories.insert(_category(user_a))

        assert categories.delete_if_owned(created.id, user_b) == 0
        assert categories.get(created.id) is not None

    def test_delete_missing_record(self, categories, user_a):
        assert categories.delete_if_owned(uuid.uuid4(), user_a) == 0
