"""Executable lookup for short command names.

Tries `which` first, then probes a fixed ordered list of system binary
directories. A missing executable is a normal result (path is None), not
an exception.

All subprocesses use asyncio.create_subprocess_exec with argv lists.
Never use shell=True.
"""

import asyncio
import logging
import os

from process_restarter.config import DEFAULT_FALLBACK_DIRS
from process_restarter.types import ResolvedExecutable

logger = logging.getLogger(__name__)


class ExecutableResolver:
    """Resolve short executable names to absolute paths.

    Results are memoized per instance, so repeated lookups of one name
    return the same path. Build a new resolver to drop the cache.
    """

    def __init__(self, fallback_dirs: list[str] | None = None):
        """Initialize resolver.

        Args:
            fallback_dirs: Directories probed in order after `which` fails,
                or None for /usr/bin, /bin, /usr/sbin, /sbin
        """
        self._fallback_dirs = list(
            DEFAULT_FALLBACK_DIRS if fallback_dirs is None else fallback_dirs
        )
        self._cache: dict[str, ResolvedExecutable] = {}

    async def resolve(self, name: str) -> ResolvedExecutable:
        """Find the absolute path of an executable.

        Args:
            name: Short name such as "killall" or "launchctl"

        Returns:
            ResolvedExecutable with path set, or path None if not found
        """
        if name in self._cache:
            return self._cache[name]

        path = None
        # Bare names only; anything with a separator is not a command name
        if name and os.sep not in name:
            path = await self._which(name)
            if path is None:
                path = self._probe(name)

        if path is None:
            logger.debug(f"Could not resolve executable '{name}'")
        else:
            logger.debug(f"Resolved '{name}' to {path}")

        resolved = ResolvedExecutable(name=name, path=path)
        self._cache[name] = resolved
        return resolved

    async def _which(self, name: str) -> str | None:
        try:
            proc = await asyncio.create_subprocess_exec(
                "which",
                name,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.debug(f"which unavailable: {e}")
            return None

        stdout, _ = await proc.communicate()
        if proc.returncode != 0:
            return None

        path = stdout.decode("utf-8", errors="replace").strip()
        return path or None

    def _probe(self, name: str) -> str | None:
        for directory in self._fallback_dirs:
            candidate = os.path.join(directory, name)
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
        return None
