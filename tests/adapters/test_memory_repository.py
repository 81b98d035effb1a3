"""Tests for the in-memory todo repository."""

from __future__ import annotations

from todos_cli.adapters.memory import InMemoryTodoRepository
from todos_cli.models import Todo
from todos_cli.repositories import TodoRepository


class TestInMemoryTodoRepository:
    """Tests for InMemoryTodoRepository."""

    def test_is_a_todo_repository(self):
        assert isinstance(InMemoryTodoRepository(), TodoRepository)

    def test_new_repository_loads_none(self):
        assert InMemoryTodoRepository().load() is None

    def test_save_then_load(self):
        todos = [Todo.create("a"), Todo.create("b", is_completed=True)]
        repo = InMemoryTodoRepository()

        repo.save(todos)

        assert repo.load() == todos

    def test_saving_empty_list_loads_none(self):
        repo = InMemoryTodoRepository()
        repo.save([Todo.create("a")])

        repo.save([])

        assert repo.load() is None

    def test_does_not_share_state_with_caller(self):
        todos = [Todo.create("a")]
        repo = InMemoryTodoRepository()
        repo.save(todos)

        todos[0].is_completed = True
        todos.append(Todo.create("b"))

        loaded = repo.load()
        assert len(loaded) == 1
        assert loaded[0].is_completed is False

    def test_instances_are_independent(self):
        first = InMemoryTodoRepository()
        first.save([Todo.create("a")])

        assert InMemoryTodoRepository().load() is None
