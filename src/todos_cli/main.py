"""Main entry point for Todos CLI."""

import typer

from todos_cli import __version__
from todos_cli.commands.decorators import command_wrapper
from todos_cli.commands.shell import TodoShell
from todos_cli.services.config_service import get_config_service
from todos_cli.services.todo_service import TodoManager
from todos_cli.utils.ui.console import get_console

app = typer.Typer(
    name="todos",
    help="An interactive command-line todo list",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Todos CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
@command_wrapper
def run(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Start the interactive todo prompt."""
    config_service = get_config_service()
    repository = config_service.storage_strategy_context.todo_repository

    manager = TodoManager(repository)
    TodoShell(manager, console=console).run()


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
