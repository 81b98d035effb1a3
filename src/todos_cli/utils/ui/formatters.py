"""Output formatters for todo messages."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from todos_cli.models import Todo
from todos_cli.utils.ui.console import get_console, get_error_console

ERROR_MARK = "⛔"


def _print(console: Console, message: str, style: str) -> None:
    # Todo titles are user text: no markup, no :emoji: codes, no wrapping
    console.print(message, style=style, markup=False, emoji=False, soft_wrap=True)


def format_error(message: str, console: Console | None = None) -> None:
    """Format and display an error message (stderr by default)."""
    _print(console or get_error_console(), f"{ERROR_MARK} {message}", "red")


def format_warning(message: str, console: Console | None = None) -> None:
    """Format and display a validation message the user can act on."""
    _print(console or get_console(), f"{ERROR_MARK} {message}", "yellow")


def format_success(message: str, console: Console | None = None) -> None:
    """Format and display a success message."""
    _print(console or get_console(), message, "green")


def format_todo_list(todos: Sequence[Todo]) -> list[str]:
    """Render todos as ``1.) title - ❌`` lines, numbered from 1."""
    return [f"{position}.) {todo}" for position, todo in enumerate(todos, start=1)]
