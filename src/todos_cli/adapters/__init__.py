"""Storage adapters for Todos CLI.

- json_file: todos persisted to ``todos.json`` in the working directory
- memory: todos kept for the current session only
"""

from .json_file import TODOS_FILE_NAME, JsonFileTodoRepository
from .memory import InMemoryTodoRepository

__all__ = [
    "TODOS_FILE_NAME",
    "JsonFileTodoRepository",
    "InMemoryTodoRepository",
]
