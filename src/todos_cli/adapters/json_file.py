"""JSON file implementation of TodoRepository.

The snapshot lives in ``todos.json`` inside the current working directory.
The path is resolved again on every call, so changing directory between
calls changes which file is used.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from todos_cli.models import Todo, TodoList
from todos_cli.repositories.repository import TodoRepository
from todos_cli.utils.logger import get_logger
from todos_cli.utils.ui.formatters import format_error

TODOS_FILE_NAME = "todos.json"


class JsonFileTodoRepository(TodoRepository):
    """Todo repository backed by a JSON file in the working directory."""

    def __init__(self, file_name: str = TODOS_FILE_NAME):
        self.file_name = file_name

    @property
    def file_path(self) -> Path:
        """Path of the todos file, relative to the current directory."""
        return Path.cwd() / self.file_name

    def save(self, todos: Sequence[Todo]) -> None:
        path = self.file_path
        try:
            data = TodoList.dump_json(list(todos), by_alias=True)
            path.write_bytes(data)
        except (OSError, PydanticSerializationError) as e:
            get_logger().exception("failed to save todos to %s", path)
            format_error(f"Failed to save todos: {e}")
            return

        get_logger().debug("saved %d todos to %s", len(todos), path)

    def load(self) -> list[Todo] | None:
        path = self.file_path
        if not path.exists():
            get_logger().debug("no todos file at %s", path)
            return None

        try:
            data = path.read_bytes()
            if not data:
                return []
            todos = TodoList.validate_json(data)
        except (OSError, ValidationError) as e:
            get_logger().exception("failed to load todos from %s", path)
            format_error(f"Failed to load todos: {e}")
            return None

        get_logger().debug("loaded %d todos from %s", len(todos), path)
        return todos
