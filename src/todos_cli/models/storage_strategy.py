"""
Strategy Pattern: Storage Strategy Container

This module implements the Strategy Pattern for repository selection.
The strategy is decided once at startup from the configuration and the
resulting repository is injected into the list manager, which never knows
which backend it is using.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todos_cli.repositories import TodoRepository


class StorageStrategy(ABC):
    """
    Abstract base class for storage strategies.

    A strategy owns the repository implementation for one storage backend
    (a JSON file or the current session's memory).
    """

    @abstractmethod
    def get_todo_repository(self) -> TodoRepository:
        """Get todo repository implementation for this strategy."""

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Get storage type identifier (for logging/debugging)."""


class FileStorageStrategy(StorageStrategy):
    """
    JSON file storage strategy.

    Todos are kept in ``todos.json`` in the working directory and survive
    between runs.
    """

    def __init__(self):
        # Import here to avoid circular dependencies
        from todos_cli.adapters.json_file import JsonFileTodoRepository

        self._todo_repo = JsonFileTodoRepository()

    def get_todo_repository(self) -> TodoRepository:
        return self._todo_repo

    @property
    def storage_type(self) -> str:
        return "file"


class MemoryStorageStrategy(StorageStrategy):
    """
    Session-only storage strategy.

    Todos live in memory and are gone when the process exits.
    """

    def __init__(self):
        from todos_cli.adapters.memory import InMemoryTodoRepository

        self._todo_repo = InMemoryTodoRepository()

    def get_todo_repository(self) -> TodoRepository:
        return self._todo_repo

    @property
    def storage_type(self) -> str:
        return "memory"


class StorageStrategyContext:
    """
    Strategy context that provides access to the todo repository.

    Usage:
        # At startup
        context = StorageStrategyContext(FileStorageStrategy())

        # In services
        manager = TodoManager(context.todo_repository)
    """

    def __init__(self, strategy: StorageStrategy):
        """
        Initialize strategy context.

        Args:
            strategy: Storage strategy (file or memory)
        """
        self._strategy = strategy

    @property
    def todo_repository(self) -> TodoRepository:
        """Get todo repository from current strategy."""
        return self._strategy.get_todo_repository()

    @property
    def storage_type(self) -> str:
        """Get storage type (for logging/debugging only)."""
        return self._strategy.storage_type


def create_storage_strategy(storage_type: str) -> StorageStrategy:
    """Build the strategy for a configured storage type."""
    if storage_type == "memory":
        return MemoryStorageStrategy()
    if storage_type == "file":
        return FileStorageStrategy()
    raise ValueError(f"Unknown storage type: {storage_type}")
