"""
Restart executor: turns a Selection into one killall/launchctl run.

Per invocation the executor:
1. Validates the selection and looks up the kill target
2. Asks for confirmation when the catalog carries a warning
3. Resolves the needed executable (killall or launchctl)
4. Builds the argv, optionally prefixed with the elevation command
5. Runs it, waits for exit, then waits a short grace period
6. Reports an Outcome

Each step strictly precedes the next. Declining the confirmation is the
only way to cancel; once the child is spawned the call runs to
completion. Every RestarterError raised along the way is converted into a
failure Outcome here, so callers never see an exception.

All subprocesses use asyncio.create_subprocess_exec with argv lists.
Never use shell=True.
"""

import asyncio
import logging
import shlex
from collections.abc import Awaitable, Callable

from process_restarter.catalog import TargetCatalog
from process_restarter.config import Settings
from process_restarter.errors import (
    ExecutionError,
    ResolutionError,
    RestarterError,
    SelectionError,
)
from process_restarter.resolver import ExecutableResolver
from process_restarter.types import Outcome, Selection, StatusKind

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str, str], Awaitable[bool]]
NotifyCallback = Callable[[StatusKind, str], None]

KILL_EXECUTABLE = "killall"
SERVICE_EXECUTABLE = "launchctl"
KILL_SIGNAL = "-KILL"
SERVICE_STOP = "stop"


def build_command(
    executable: str,
    target: str,
    is_advanced: bool,
    use_elevated: bool = False,
    elevation_command: str = "sudo",
) -> list[str]:
    """
    Build the argv for one restart.

    Args:
        executable: Absolute path of killall (static) or launchctl (advanced)
        target: Kill target such as "Dock" or "-HUP WindowServer", or a
            service identifier in advanced mode
        is_advanced: Stop a service instead of killing a process
        use_elevated: Prefix with the elevation command
        elevation_command: Elevation prefix, e.g. "sudo"

    Returns:
        Argv list, e.g. ["sudo", "/usr/bin/killall", "-KILL", "Dock"]
    """
    prefix = shlex.split(elevation_command) if use_elevated else []
    if is_advanced:
        return [*prefix, executable, SERVICE_STOP, target]
    return [*prefix, executable, KILL_SIGNAL, *shlex.split(target)]


class RestartExecutor:
    """
    Executes restart selections.

    The executor holds no state between invocations. Presentation concerns
    come in through two callbacks: `confirm` for the warning prompt and
    `notify` for status notifications.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: TargetCatalog | None = None,
        confirm: ConfirmCallback | None = None,
        notify: NotifyCallback | None = None,
        resolver_factory: Callable[[list[str]], ExecutableResolver] = ExecutableResolver,
    ) -> None:
        """
        Initialize executor.

        Args:
            settings: Configuration, or None for environment defaults
            catalog: Target catalog, or None for the shipped catalog
            confirm: Async (title, message) -> bool. Without it, warned
                targets are always declined
            notify: (kind, message) -> None for status notifications
            resolver_factory: Builds one resolver per invocation from the
                fallback directory list
        """
        self._settings = settings or Settings()
        self._catalog = catalog if catalog is not None else TargetCatalog()
        self._confirm = confirm
        self._notify = notify
        self._resolver_factory = resolver_factory

    async def perform(
        self,
        selection: Selection,
        use_elevated: bool | None = None,
    ) -> Outcome:
        """
        Restart the selected process or service.

        Args:
            selection: What to restart
            use_elevated: Override settings.use_sudo for this call

        Returns:
            Outcome with status success, failure or declined
        """
        if use_elevated is None:
            use_elevated = self._settings.use_sudo

        label = selection.label
        try:
            target = self._resolve_target(selection)

            if not selection.is_advanced:
                warning = self._catalog.warning_for(label)
                if warning and not await self._confirm_warning(warning):
                    logger.info(f"Restart of {label} declined by user")
                    return Outcome.declined(label)

            self._emit(StatusKind.IN_PROGRESS, f"Restarting {label}...")

            exe_name = SERVICE_EXECUTABLE if selection.is_advanced else KILL_EXECUTABLE
            resolver = self._resolver_factory(self._settings.fallback_dirs)
            executable = await resolver.resolve(exe_name)
            if not executable.found:
                raise ResolutionError(exe_name)

            command = build_command(
                executable.path,
                target,
                selection.is_advanced,
                use_elevated=use_elevated,
                elevation_command=self._settings.elevation_command,
            )
            returncode, stdout, stderr = await self._run(command)
        except ExecutionError as e:
            outcome = Outcome.failed(
                label,
                f"Error: {e}",
                command=e.command,
                returncode=e.returncode,
                stderr=e.stderr,
            )
        except RestarterError as e:
            outcome = Outcome.failed(label, str(e))
        else:
            outcome = Outcome.succeeded(
                label,
                command=command,
                returncode=returncode,
                stdout=stdout,
                stderr=stderr,
            )

        if outcome.success:
            self._emit(StatusKind.SUCCESS, outcome.message)
        else:
            logger.warning(f"Restart of '{label}' failed: {outcome.message}")
            self._emit(StatusKind.FAILURE, outcome.message)
        return outcome

    def _resolve_target(self, selection: Selection) -> str:
        if not selection.label:
            raise SelectionError("No process selected")
        if selection.is_advanced:
            return selection.label

        target = self._catalog.kill_target(selection.label)
        if target is None:
            raise SelectionError(f"Unknown process: {selection.label}")
        return target

    async def _confirm_warning(self, warning: str) -> bool:
        if self._confirm is None:
            return False
        return bool(await self._confirm("Warning", warning))

    async def _run(self, command: list[str]) -> tuple[int, str, str]:
        """
        Spawn the command and wait for it to exit.

        Returns:
            (returncode, stdout, stderr)

        Raises:
            ExecutionError: If the process cannot start or exits non-zero
        """
        logger.info(f"Running: {shlex.join(command)}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"Failed to start {command[0]}: {e}")
            raise ExecutionError(str(e)) from e

        out, err = await proc.communicate()
        returncode = proc.returncode
        stdout = out.decode("utf-8", errors="replace").strip()
        stderr = err.decode("utf-8", errors="replace").strip()

        if stdout:
            logger.debug(f"stdout: {stdout}")
        if stderr:
            logger.debug(f"stderr: {stderr}")

        # Let the OS finish tearing the target down before reporting
        await asyncio.sleep(self._settings.grace_period_s)

        if returncode != 0:
            detail = f"Command failed with exit code {returncode}: {shlex.join(command)}"
            if stderr:
                detail = f"{detail}\n{stderr}"
            raise ExecutionError(
                detail, command=command, returncode=returncode, stderr=stderr
            )

        if stderr:
            logger.warning(f"{command[0]} exited 0 but wrote to stderr: {stderr}")
        return returncode, stdout, stderr

    def _emit(self, kind: StatusKind, message: str) -> None:
        if self._notify is not None:
            self._notify(kind, message)
