"""Restarter CLI - force-restart macOS system processes and daemons."""

import logging

import typer
from rich.logging import RichHandler

from process_restarter.cli.restart import list_targets, restart

app = typer.Typer(
    name="restarter",
    help="Force-restart macOS system processes and daemons",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("list")(list_targets)
app.command("restart")(restart)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
