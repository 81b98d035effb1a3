"""Todos CLI domain models.

This package contains the Pydantic models that represent the domain entities
of the application, plus the configuration models.
"""

from .config_models import AppConfig
from .todo import Todo, TodoList

__all__ = [
    "Todo",
    "TodoList",
    "AppConfig",
]
