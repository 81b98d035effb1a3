"""Tests for output formatters."""

from __future__ import annotations

import io

from rich.console import Console

from todos_cli.models import Todo
from todos_cli.utils.ui.formatters import (
    format_error,
    format_success,
    format_todo_list,
    format_warning,
)


def _console() -> tuple[Console, io.StringIO]:
    out = io.StringIO()
    return Console(file=out, width=200, color_system=None), out


def test_format_todo_list_numbers_from_one():
    todos = [Todo.create("a"), Todo.create("b", is_completed=True)]

    assert format_todo_list(todos) == ["1.) a - ❌", "2.) b - ✅"]


def test_format_todo_list_empty():
    assert format_todo_list([]) == []


def test_format_error_goes_to_stderr(capsys):
    format_error("disk full")

    captured = capsys.readouterr()
    assert "⛔ disk full" in captured.err
    assert captured.out == ""


def test_format_warning_prefix():
    console, out = _console()
    format_warning("Invalid input.", console=console)
    assert out.getvalue().strip() == "⛔ Invalid input."


def test_format_success_is_literal():
    console, out = _console()
    format_success('"[red]x[/red] :smile:" added', console=console)
    assert out.getvalue().strip() == '"[red]x[/red] :smile:" added'
