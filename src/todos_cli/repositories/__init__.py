"""Repository interfaces for Todos CLI."""

from .repository import TodoRepository

__all__ = ["TodoRepository"]
