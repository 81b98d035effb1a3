"""In-memory implementation of TodoRepository."""

from __future__ import annotations

from collections.abc import Sequence

from todos_cli.models import Todo
from todos_cli.repositories.repository import TodoRepository


class InMemoryTodoRepository(TodoRepository):
    """Keeps the todo list for the lifetime of this object only.

    Nothing is written to disk; a new process starts empty.
    """

    def __init__(self):
        self._todos: list[Todo] = []

    def save(self, todos: Sequence[Todo]) -> None:
        self._todos = [todo.model_copy() for todo in todos]

    def load(self) -> list[Todo] | None:
        if not self._todos:
            return None
        return [todo.model_copy() for todo in self._todos]
