"""Interactive command loop of todos-cli."""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum

from rich.console import Console

from todos_cli.services.todo_service import InvalidIndexError, TodoManager
from todos_cli.utils.logger import get_logger
from todos_cli.utils.ui.console import get_console
from todos_cli.utils.ui.formatters import (
    format_success,
    format_todo_list,
    format_warning,
)

BANNER = "⚡ The Todos CLI ⚡"
COMMAND_PROMPT = "What would you like to do? (add, list, toggle, delete, exit): "
TITLE_PROMPT = "Enter todo title: "
INDEX_PROMPT = "Type in the number of the todo you want to {action}: "
# Optional sign and ASCII digits only: no padding, no underscores
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


class TodoShell:
    """Reads commands line by line and dispatches them to a TodoManager."""

    class Command(str, Enum):
        ADD = "add"
        LIST = "list"
        TOGGLE = "toggle"
        DELETE = "delete"
        EXIT = "exit"

    def __init__(
        self,
        manager: TodoManager,
        console: Console | None = None,
        input_func: Callable[[str], str] | None = None,
    ):
        self.manager = manager
        self.console = console or get_console()
        self._input = input_func or self._console_input

    def run(self) -> None:
        """Run the loop until ``exit`` or end of input."""
        self._say(BANNER)

        while True:
            try:
                line = self._input(COMMAND_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

            try:
                command = self.Command(line.strip().lower())
            except ValueError:
                self._say("Sorry, command not recognized. Please try again.")
                continue

            get_logger().debug("shell command: %s", command.value)
            if command is self.Command.EXIT:
                break

            try:
                self.dispatch(command)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

        self._say("Goodbye 👋🏾")

    def dispatch(self, command: Command) -> None:
        """Run one command that is not ``exit``."""
        if command is self.Command.ADD:
            self.add()
        elif command is self.Command.LIST:
            self.show_list()
        elif command is self.Command.TOGGLE:
            self.toggle()
        elif command is self.Command.DELETE:
            self.delete()

    def add(self) -> None:
        title = self._input(TITLE_PROMPT)
        todo = self.manager.add_todo(title)
        format_success(f'"{todo}" added to list ✍🏾.', console=self.console)

    def show_list(self) -> None:
        self._say("Your todo list 📋: ")
        for line in format_todo_list(self.manager.list_todos()):
            self._say(line)

    def toggle(self) -> None:
        index = self._ask_index("toggle")
        if index is None:
            return

        try:
            todo = self.manager.toggle_completion(index)
        except InvalidIndexError:
            format_warning(
                "Please enter a valid number in the list to select a todo to toggle.",
                console=self.console,
            )
            return

        state = "complete ✅" if todo.is_completed else "incomplete ❌"
        format_success(
            f'"{todo.title}" has been set to {state}.', console=self.console
        )

    def delete(self) -> None:
        index = self._ask_index("delete")
        if index is None:
            return

        try:
            todo = self.manager.delete_todo(index)
        except InvalidIndexError:
            format_warning(
                "Please enter a valid number in the list to select a todo to delete.",
                console=self.console,
            )
            return

        format_success(f'"{todo}" deleted from list.', console=self.console)

    def _ask_index(self, action: str) -> int | None:
        """Show the list and read a 1-based position, returned 0-based."""
        self.show_list()
        answer = self._input(INDEX_PROMPT.format(action=action))
        if not INDEX_PATTERN.fullmatch(answer):
            format_warning(
                "Invalid input. Please enter a number.", console=self.console
            )
            return None
        return int(answer) - 1

    def _say(self, text: str) -> None:
        self.console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)
