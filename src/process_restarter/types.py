"""
Value types passed between the executor and its callers.

This module defines:
- Selection: what the user picked (catalog label or service identifier)
- OutcomeStatus: terminal state of one restart invocation
- Outcome: result handed back to the presentation layer
- StatusKind: the three user-facing notification kinds
- ResolvedExecutable: result of looking up a short command name

Per project patterns:
- Use str enum for JSON serialization compatibility
- Pydantic BaseModel for validation and serialization
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Selection(BaseModel):
    """
    One user submission.

    Produced once per submission and consumed immediately by
    RestartExecutor.perform(); never stored.

    Attributes:
        label: Catalog label, or raw service identifier in advanced mode
        is_advanced: True when label came from the live service list
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="", description="Catalog label or service identifier")
    is_advanced: bool = Field(default=False, description="Label is a service identifier")


class OutcomeStatus(str, Enum):
    """
    Terminal states of a restart invocation.

        validating -> (confirming)? -> resolving -> executing -> success/failure
        confirming -> declined
    """

    SUCCESS = "success"
    """Command ran and exited cleanly."""

    FAILURE = "failure"
    """Selection, resolution or execution failed."""

    DECLINED = "declined"
    """User declined the warning; nothing was run."""


class StatusKind(str, Enum):
    """User-facing notification kinds."""

    IN_PROGRESS = "in_progress"
    SUCCESS = "success"
    FAILURE = "failure"


class Outcome(BaseModel):
    """
    Result of RestartExecutor.perform().

    Attributes:
        status: Terminal state
        label: Label from the selection
        message: Human-readable summary suitable for a notification
        command: Argv that was executed (empty if nothing ran)
        returncode: Exit status of the command, None if nothing ran
        stdout: Captured standard output (diagnostics only)
        stderr: Captured standard error (diagnostics only)
    """

    status: OutcomeStatus
    label: str = ""
    message: str = ""
    command: list[str] = Field(default_factory=list)
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""

    @computed_field
    @property
    def success(self) -> bool:
        """True only for SUCCESS."""
        return self.status == OutcomeStatus.SUCCESS

    @classmethod
    def succeeded(cls, label: str, **kwargs) -> "Outcome":
        return cls(status=OutcomeStatus.SUCCESS, label=label, message=f"{label} restarted", **kwargs)

    @classmethod
    def failed(cls, label: str, message: str, **kwargs) -> "Outcome":
        return cls(status=OutcomeStatus.FAILURE, label=label, message=message, **kwargs)

    @classmethod
    def declined(cls, label: str) -> "Outcome":
        return cls(status=OutcomeStatus.DECLINED, label=label)


class ResolvedExecutable(BaseModel):
    """
    Absolute location of a short command name, if one was found.

    Attributes:
        name: Short name that was looked up (e.g. "killall")
        path: Absolute path, or None when not found
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str | None = None

    @property
    def found(self) -> bool:
        return self.path is not None
