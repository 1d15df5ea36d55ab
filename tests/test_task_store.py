"""Tests for the in-memory task store."""

import doctest
from unittest.mock import patch

import taskpad.editor.view as view_module
import taskpad.tasks.store as store_module
from taskpad.logging import configure_logging
from taskpad.tasks.models import Task, TaskInput, TaskPriority
from taskpad.tasks.store import TaskStore
from tests.helpers import ids_of, make_input, make_task


class TestStoreInitialization:
    """Tests for a fresh store."""

    def test_starts_empty(self, store: TaskStore):
        assert store.list() == []
        assert store.is_empty()
        assert len(store) == 0


class TestAdd:
    """Tests for TaskStore.add."""

    def test_add_single_task(self, store: TaskStore):
        store.add(make_input(title="Write report"))

        tasks = store.list()
        assert len(tasks) == 1
        assert tasks[0].id == 1
        assert tasks[0].title == "Write report"

    def test_ids_increase_from_one(self, store: TaskStore):
        for i in range(5):
            store.add(make_input(title=f"Task {i}"))

        assert ids_of(store.list()) == [1, 2, 3, 4, 5]

    def test_preserves_insertion_order(self, store: TaskStore):
        store.add(make_input(title="First"))
        store.add(make_input(title="Second"))
        store.add(make_input(title="Third"))

        assert [t.title for t in store.list()] == ["First", "Second", "Third"]

    def test_two_adds_scenario(self, store: TaskStore):
        store.add(TaskInput(title="A", description="d", priority=TaskPriority.LOW))
        store.add(TaskInput(title="B", description="d", priority=TaskPriority.HIGH))

        assert store.list() == [
            Task(id=1, title="A", description="d", priority=TaskPriority.LOW),
            Task(id=2, title="B", description="d", priority=TaskPriority.HIGH),
        ]

    def test_empty_title_and_description_allowed(self, store: TaskStore):
        store.add(TaskInput(title="", description=""))

        task = store.list()[0]
        assert task.title == ""
        assert task.description == ""
        assert task.priority == TaskPriority.LOW

    def test_add_returns_nothing(self, store: TaskStore):
        assert store.add(make_input()) is None

    def test_ids_not_reused_after_delete(self, store: TaskStore):
        store.add(make_input(title="One"))
        store.add(make_input(title="Two"))
        store.delete(2)

        store.add(make_input(title="Three"))

        assert ids_of(store.list()) == [1, 3]

    def test_ids_keep_increasing_after_emptying(self, store: TaskStore):
        store.add(make_input())
        store.delete(1)
        store.add(make_input())

        assert ids_of(store.list()) == [2]


class TestList:
    """Tests for TaskStore.list snapshots."""

    def test_returns_new_list_each_call(self, populated_store: TaskStore):
        first = populated_store.list()
        second = populated_store.list()

        assert first == second
        assert first is not second

    def test_mutating_snapshot_does_not_affect_store(self, populated_store: TaskStore):
        snapshot = populated_store.list()
        snapshot.clear()
        snapshot.append(make_task(99, title="Intruder"))

        assert ids_of(populated_store.list()) == [1, 2, 3]
        assert 99 not in populated_store

    def test_snapshot_taken_before_add_is_unchanged(self, populated_store: TaskStore):
        snapshot = populated_store.list()
        populated_store.add(make_input(title="Task 4"))

        assert len(snapshot) == 3
        assert len(populated_store.list()) == 4


class TestDelete:
    """Tests for TaskStore.delete."""

    def test_delete_middle_task(self, populated_store: TaskStore):
        populated_store.delete(2)

        assert ids_of(populated_store.list()) == [1, 3]

    def test_delete_first_task(self, populated_store: TaskStore):
        populated_store.delete(1)

        assert ids_of(populated_store.list()) == [2, 3]

    def test_delete_unknown_id_is_noop(self, populated_store: TaskStore):
        before = populated_store.list()

        populated_store.delete(999)

        assert populated_store.list() == before

    def test_delete_from_empty_store(self, store: TaskStore):
        store.delete(1)

        assert store.list() == []

    def test_delete_only_task(self, store: TaskStore):
        store.add(make_input())

        store.delete(1)

        assert store.is_empty()

    def test_delete_is_idempotent(self, populated_store: TaskStore):
        populated_store.delete(2)
        after_once = populated_store.list()

        populated_store.delete(2)

        assert populated_store.list() == after_once

    def test_delete_all_tasks(self, populated_store: TaskStore):
        for task_id in (1, 2, 3):
            populated_store.delete(task_id)

        assert populated_store.list() == []


class TestUpdate:
    """Tests for TaskStore.update."""

    def test_update_replaces_all_fields(self, populated_store: TaskStore):
        updated = Task(id=2, title="New", description="New desc", priority=TaskPriority.HIGH)

        populated_store.update(updated)

        assert populated_store.get(2) == updated

    def test_update_keeps_position(self, populated_store: TaskStore):
        populated_store.update(make_task(1, title="Updated Task 1"))

        tasks = populated_store.list()
        assert ids_of(tasks) == [1, 2, 3]
        assert tasks[0].title == "Updated Task 1"

    def test_update_leaves_other_tasks_alone(self, populated_store: TaskStore):
        before = populated_store.list()

        populated_store.update(before[0].replace(title="Changed"))

        after = populated_store.list()
        assert after[1:] == before[1:]

    def test_update_unknown_id_is_noop(self, populated_store: TaskStore):
        before = populated_store.list()

        populated_store.update(make_task(999, title="Ghost Task"))

        assert populated_store.list() == before

    def test_update_on_empty_store(self, store: TaskStore):
        store.update(make_task(1))

        assert store.list() == []

    def test_update_does_not_advance_ids(self, populated_store: TaskStore):
        populated_store.update(make_task(2, title="Edited"))
        populated_store.add(make_input(title="Task 4"))

        assert ids_of(populated_store.list()) == [1, 2, 3, 4]


class TestLookup:
    """Tests for get / contains helpers."""

    def test_get_existing(self, populated_store: TaskStore):
        task = populated_store.get(3)

        assert task is not None
        assert task.title == "Task 3"

    def test_get_missing(self, populated_store: TaskStore):
        assert populated_store.get(42) is None

    def test_contains(self, populated_store: TaskStore):
        assert 1 in populated_store
        assert 4 not in populated_store


class TestLifecycle:
    """End-to-end store scenarios."""

    def test_add_edit_delete_workflow(self, store: TaskStore):
        store.add(make_input(title="Task 1"))
        store.add(make_input(title="Task 2"))

        first = store.list()[0]
        store.update(first.replace(title="Updated Task 1"))
        assert store.list()[0].title == "Updated Task 1"

        store.delete(1)
        assert ids_of(store.list()) == [2]

    def test_realistic_lifecycle(self, store: TaskStore):
        store.add(TaskInput("Setup project", "Initialize repo", TaskPriority.HIGH))
        store.add(TaskInput("Write tests", "Add unit tests", TaskPriority.MEDIUM))
        store.add(TaskInput("Deploy", "Deploy to production", TaskPriority.LOW))

        store.delete(1)
        deploy = store.get(3)
        store.update(deploy.replace(priority=TaskPriority.HIGH))
        store.add(TaskInput("Hotfix", "Critical bug fix", TaskPriority.HIGH))

        tasks = store.list()
        assert ids_of(tasks) == [2, 3, 4]
        assert store.get(3).priority == TaskPriority.HIGH


class TestStoreEvents:
    """Tests for the events the store logs."""

    def test_add_logs_task_record(self, store: TaskStore):
        with patch("taskpad.tasks.store.logger") as logger:
            store.add(make_input(title="Logged", priority=TaskPriority.HIGH))

        logger.info.assert_called_once_with(
            "task_added",
            task={
                "id": 1,
                "title": "Logged",
                "description": "Test Description",
                "priority": "High",
            },
        )

    def test_update_logs_new_record(self, populated_store: TaskStore):
        with patch("taskpad.tasks.store.logger") as logger:
            populated_store.update(make_task(2, title="Renamed", priority=TaskPriority.LOW))

        assert logger.info.call_args.args == ("task_updated",)
        assert logger.info.call_args.kwargs["task"]["title"] == "Renamed"
        assert logger.info.call_args.kwargs["task"]["priority"] == "Low"

    def test_missing_ids_log_at_debug(self, store: TaskStore):
        with patch("taskpad.tasks.store.logger") as logger:
            store.delete(7)
            store.update(make_task(7))

        logger.info.assert_not_called()
        assert [c.args[0] for c in logger.debug.call_args_list] == [
            "task_delete_missing",
            "task_update_missing",
        ]


class TestDocExamples:
    """The usage examples in the store and view docstrings run as written."""

    def test_examples_pass(self, mock_context):
        configure_logging(mock_context.settings)

        for module in (store_module, view_module):
            results = doctest.testmod(module)
            assert results.attempted > 0
            assert results.failed == 0
