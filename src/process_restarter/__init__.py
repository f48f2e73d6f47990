"""
Process Restarter

Force-restart macOS system processes (Dock, Finder, WindowServer, ...) and
stop loaded launchd services. This package provides:

- TargetCatalog: curated label -> killall target table with warnings
- ExecutableResolver: locate killall/launchctl
- AdvancedTargetLister: enumerate loaded services via launchctl
- RestartExecutor: confirm, resolve, run, wait, report
- CLI infrastructure: Typer-based `restarter` command
"""

__version__ = "0.1.0"

from process_restarter.catalog import CATALOG, WARNINGS, TargetCatalog
from process_restarter.config import Settings, get_settings
from process_restarter.errors import (
    CatalogError,
    EnumerationError,
    ExecutionError,
    ResolutionError,
    RestarterError,
    SelectionError,
)
from process_restarter.executor import RestartExecutor, build_command
from process_restarter.resolver import ExecutableResolver
from process_restarter.services import AdvancedTargetLister, parse_service_list
from process_restarter.types import (
    Outcome,
    OutcomeStatus,
    ResolvedExecutable,
    Selection,
    StatusKind,
)

__all__ = [
    "__version__",
    # Catalog
    "CATALOG",
    "WARNINGS",
    "TargetCatalog",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "RestarterError",
    "SelectionError",
    "ResolutionError",
    "ExecutionError",
    "EnumerationError",
    "CatalogError",
    # Execution
    "RestartExecutor",
    "build_command",
    "ExecutableResolver",
    "AdvancedTargetLister",
    "parse_service_list",
    # Types
    "Selection",
    "Outcome",
    "OutcomeStatus",
    "StatusKind",
    "ResolvedExecutable",
]
