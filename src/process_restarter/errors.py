"""
Error taxonomy for restart operations.

Every failure a restart can run into is one of these. The executor catches
them at the point of occurrence and turns them into an Outcome; only
EnumerationError reaches callers of the advanced lister directly.
"""


class RestarterError(Exception):
    """Base class for all restarter errors."""


class SelectionError(RestarterError):
    """No target chosen, or the chosen label is not in the catalog."""


class ResolutionError(RestarterError):
    """
    Required executable could not be located on this system.

    Attributes:
        executable: Short name that failed to resolve (e.g. "killall")
    """

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"{executable} executable not found")


class ExecutionError(RestarterError):
    """
    Spawned command failed to start or exited non-zero.

    Attributes:
        command: Argv that ran, empty if the process never started
        returncode: Exit status, or None if the process never started
        stderr: Captured standard error (diagnostics only)
    """

    def __init__(
        self,
        detail: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command or [])
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(detail)


class EnumerationError(RestarterError):
    """Service manager listing failed; no partial results are returned."""


class CatalogError(RestarterError):
    """Static target tables are inconsistent."""
