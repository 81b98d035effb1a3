"""Todos CLI - a small interactive todo-list manager."""

__version__ = "1.0.0"
