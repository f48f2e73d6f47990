"""CLI commands for listing and restarting targets.

Provides:
- list: Show the curated catalog, or live services with --advanced
- restart: Restart one target, prompting for it when not given

Per project patterns:
- Use envvar parameter for environment variable fallback
- Async work wrapped in asyncio.run() inside each command
"""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from process_restarter.catalog import TargetCatalog
from process_restarter.config import get_settings
from process_restarter.errors import EnumerationError
from process_restarter.executor import RestartExecutor
from process_restarter.resolver import ExecutableResolver
from process_restarter.services import AdvancedTargetLister
from process_restarter.types import OutcomeStatus, Selection, StatusKind

console = Console()

STATUS_STYLES = {
    StatusKind.IN_PROGRESS: "cyan",
    StatusKind.SUCCESS: "green",
    StatusKind.FAILURE: "red",
}


def _notify(kind: StatusKind, message: str) -> None:
    style = STATUS_STYLES[kind]
    console.print(f"[{style}]{message}[/{style}]")


async def _confirm(title: str, message: str) -> bool:
    console.print(f"[yellow bold]{title}:[/yellow bold] {message}")
    # Prompt blocks on stdin; keep it off the event loop
    return await asyncio.to_thread(typer.confirm, "Continue?", default=False)


async def _load_services(vendor_prefix: str, fallback_dirs: list[str]) -> list[str]:
    lister = AdvancedTargetLister(
        resolver_factory=lambda: ExecutableResolver(fallback_dirs),
        vendor_prefix=vendor_prefix,
    )
    try:
        return await lister.list_targets()
    except EnumerationError as e:
        console.print(f"[red]Could not list services: {e}[/red]")
        raise typer.Exit(1)


def _pick(options: list[str], title: str) -> str:
    """Show a numbered table and prompt for one entry."""
    if not options:
        console.print("[yellow]Nothing to choose from.[/yellow]")
        raise typer.Exit(1)

    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name", style="green")
    for index, option in enumerate(options, start=1):
        table.add_row(str(index), option)
    console.print(table)

    choice = typer.prompt("Select", type=int)
    if not 1 <= choice <= len(options):
        console.print(f"[red]Invalid selection {choice}.[/red]")
        raise typer.Exit(1)
    return options[choice - 1]


def list_targets(
    advanced: bool = typer.Option(
        False, "--advanced", "-a", help="List loaded system services instead"
    ),
) -> None:
    """List restartable processes."""
    settings = get_settings()

    if advanced:
        services = asyncio.run(
            _load_services(settings.vendor_prefix, settings.fallback_dirs)
        )
        if not services:
            console.print(f"[dim]No services found under {settings.vendor_prefix}.[/dim]")
            return

        table = Table(title=f"Services ({settings.vendor_prefix})")
        table.add_column("Service", style="green")
        for service in services:
            table.add_row(service)
        console.print(table)
        return

    catalog = TargetCatalog()
    table = Table(title="Processes")
    table.add_column("Name", style="green")
    table.add_column("Target", style="cyan")
    table.add_column("Warning", style="yellow")
    for label in catalog:
        table.add_row(label, catalog.kill_target(label), catalog.warning_for(label) or "-")
    console.print(table)


def restart(
    label: str = typer.Argument(
        None, help="Process name from `restarter list`, or a service identifier with --advanced"
    ),
    advanced: bool = typer.Option(
        False,
        "--advanced",
        "-a",
        help="Stop a loaded system service. Only use if you know what you're doing.",
    ),
    sudo: bool = typer.Option(
        None,
        "--sudo/--no-sudo",
        envvar="RESTARTER_USE_SUDO",
        help="Run the command with sudo",
    ),
    grace_ms: int = typer.Option(
        None, "--grace-ms", min=0, help="Delay after exit before reporting (default: 5)"
    ),
) -> None:
    """Restart a process or system service."""
    settings = get_settings(use_sudo=sudo, grace_period_ms=grace_ms)

    if label is None:
        if advanced:
            options = asyncio.run(
                _load_services(settings.vendor_prefix, settings.fallback_dirs)
            )
            label = _pick(options, f"Services ({settings.vendor_prefix})")
        else:
            label = _pick(TargetCatalog().labels(), "Processes")

    executor = RestartExecutor(settings, confirm=_confirm, notify=_notify)
    outcome = asyncio.run(executor.perform(Selection(label=label, is_advanced=advanced)))

    if outcome.status == OutcomeStatus.FAILURE:
        raise typer.Exit(1)
