"""
Live service enumeration for advanced mode.

Runs `launchctl list` once, keeps the rows whose label belongs to the
vendor namespace, and returns their identifiers. The list is rebuilt on
every call; nothing is cached between activations.

`launchctl list` output looks like:

    PID     Status  Label
    -       0       com.apple.SafariHistoryServiceAgent
    512     0       com.apple.Finder
    -       0       org.example.helper
"""

import asyncio
import logging
from collections.abc import Callable

from process_restarter.errors import EnumerationError
from process_restarter.resolver import ExecutableResolver

logger = logging.getLogger(__name__)

HEADER_LABEL = "Label"


def parse_service_list(output: str, vendor_prefix: str) -> list[str]:
    """
    Extract service identifiers from `launchctl list` output.

    Takes the third whitespace-separated column of each line, keeping only
    identifiers in the vendor namespace. Order is preserved and duplicates
    are dropped.

    Args:
        output: Raw stdout of `launchctl list`
        vendor_prefix: Namespace filter (e.g. "com.apple")

    Returns:
        Service identifiers in listing order
    """
    services: list[str] = []
    seen: set[str] = set()

    for line in output.splitlines():
        columns = line.split()
        if len(columns) < 3:
            continue

        identifier = columns[2].strip()
        if identifier == HEADER_LABEL or not identifier.startswith(vendor_prefix):
            continue
        if identifier in seen:
            continue

        seen.add(identifier)
        services.append(identifier)

    return services


class AdvancedTargetLister:
    """Enumerates loaded services from the system service manager."""

    def __init__(
        self,
        resolver_factory: Callable[[], ExecutableResolver] = ExecutableResolver,
        vendor_prefix: str = "com.apple",
    ):
        """
        Initialize lister.

        Args:
            resolver_factory: Builds a fresh resolver for each listing
            vendor_prefix: Namespace filter for service identifiers
        """
        self._resolver_factory = resolver_factory
        self._vendor_prefix = vendor_prefix

    async def list_targets(self) -> list[str]:
        """
        List service identifiers in the vendor namespace.

        Returns:
            Fully materialized list of identifiers

        Raises:
            EnumerationError: If launchctl is missing, cannot be started,
                exits non-zero, or produces undecodable output
        """
        resolver = self._resolver_factory()
        launchctl = await resolver.resolve("launchctl")
        if not launchctl.found:
            raise EnumerationError("launchctl executable not found")

        try:
            proc = await asyncio.create_subprocess_exec(
                launchctl.path,
                "list",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"Failed to start launchctl list: {e}")
            raise EnumerationError(f"Failed to start launchctl: {e}") from e

        stdout, stderr = await proc.communicate()

        if proc.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            logger.error(f"launchctl list exited {proc.returncode}: {detail}")
            raise EnumerationError(
                f"launchctl list exited with status {proc.returncode}"
                + (f": {detail}" if detail else "")
            )

        try:
            output = stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EnumerationError(f"Unreadable launchctl output: {e}") from e

        services = parse_service_list(output, self._vendor_prefix)
        logger.debug(f"Found {len(services)} services under {self._vendor_prefix}")
        return services
