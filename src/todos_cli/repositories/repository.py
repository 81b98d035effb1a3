"""Repository abstraction layer for Todos CLI.

This module defines the persistence interface for the todo list, following
the Ports & Adapters pattern. The list manager only ever talks to a
``TodoRepository``; concrete adapters decide where the snapshot lives.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from todos_cli.models import Todo


class TodoRepository(ABC):
    """Abstract base class for todo list persistence.

    A repository stores whole snapshots of the list. It never holds a live
    reference to the caller's working list.
    """

    @abstractmethod
    def save(self, todos: Sequence[Todo]) -> None:
        """Persist the given todos, replacing any previous snapshot.

        Args:
            todos: The full list of todos, in order

        Failures are reported by the adapter and not raised to the caller.
        """
        raise NotImplementedError(
            "TodoRepository.save() must be implemented by adapter"
        )

    @abstractmethod
    def load(self) -> list[Todo] | None:
        """Load the last saved snapshot.

        Returns:
            None if no snapshot exists or it could not be read,
            an empty list if the snapshot holds no todos,
            otherwise the todos in their saved order.
        """
        raise NotImplementedError(
            "TodoRepository.load() must be implemented by adapter"
        )
