"""Todo service - the in-memory todo list and its operations.

The manager owns the working list. Every mutation is written through to the
repository as a full snapshot; listing is read-only.
"""

from __future__ import annotations

from todos_cli.commands.decorators import AppError
from todos_cli.models import Todo
from todos_cli.repositories import TodoRepository
from todos_cli.utils.logger import get_logger


class InvalidIndexError(AppError):
    """Raised when a todo index is outside the current list."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} is out of range for {length} todo(s)")
        self.index = index
        self.length = length


class TodoManager:
    """Manages the ordered todo list.

    The list is seeded from the repository at construction and saved back
    after every add, toggle and delete.
    """

    def __init__(self, repository: TodoRepository):
        """Initialize the manager.

        Args:
            repository: TodoRepository implementation used for persistence
        """
        self.repository = repository
        self.todos: list[Todo] = repository.load() or []
        get_logger().info("todo manager started with %d todos", len(self.todos))

    def list_todos(self) -> list[Todo]:
        """Return the todos in their current order."""
        return list(self.todos)

    def add_todo(self, title: str) -> Todo:
        """Append a new todo with the given title.

        Args:
            title: Todo text; empty strings are accepted

        Returns:
            The created Todo
        """
        todo = Todo.create(title)
        self.todos.append(todo)
        self._save()
        get_logger().info("added todo %s", todo.id)
        return todo

    def toggle_completion(self, index: int) -> Todo:
        """Flip the completion flag of the todo at a 0-based index.

        Raises:
            InvalidIndexError: If index is outside the list; nothing changes
        """
        self._check_index(index)
        todo = self.todos[index]
        todo.is_completed = not todo.is_completed
        self._save()
        get_logger().info("toggled todo %s to %s", todo.id, todo.is_completed)
        return todo

    def delete_todo(self, index: int) -> Todo:
        """Remove the todo at a 0-based index.

        Raises:
            InvalidIndexError: If index is outside the list; nothing changes
        """
        self._check_index(index)
        todo = self.todos.pop(index)
        self._save()
        get_logger().info("deleted todo %s", todo.id)
        return todo

    def _check_index(self, index: int) -> None:
        # Negative indexes are rejected, not counted from the end
        if not 0 <= index < len(self.todos):
            raise InvalidIndexError(index, len(self.todos))

    def _save(self) -> None:
        self.repository.save(list(self.todos))
