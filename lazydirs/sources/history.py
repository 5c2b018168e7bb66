"""Directory history from an external frecency tool (``zoxide`` by default)."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from ..errors import SourceUnavailableError

logger = logging.getLogger(__name__)

HISTORY_QUERY_TIMEOUT_SECONDS = 5.0


class HistorySource:
    """Query visited directories, excluding the current one.

    Emptiness is cached per excluded path so repeated "is there anything to
    show?" checks do not spawn the tool again.
    """

    def __init__(self, command: str = "zoxide") -> None:
        self.command = command
        self._empty_by_cwd: dict[str, bool] = {}

    def _query_args(self, exclude_path: str) -> list[str]:
        return [self.command, "query", "-l", "--exclude", exclude_path]

    def query(self, exclude_path: Path | str) -> list[str]:
        """Run the tool and return paths, raising :class:`SourceUnavailableError` on failure."""
        exclude = str(exclude_path)
        if shutil.which(self.command) is None:
            raise SourceUnavailableError(f"{self.command} is not installed")
        try:
            proc = subprocess.run(
                self._query_args(exclude),
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                check=True,
                timeout=HISTORY_QUERY_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise SourceUnavailableError(f"{self.command} query failed: {exc}") from exc
        return [line for line in proc.stdout.splitlines() if line.strip()]

    def directories(self, exclude_path: Path | str) -> list[str]:
        """Return history paths; any failure is logged and read as empty."""
        try:
            paths = self.query(exclude_path)
        except SourceUnavailableError as exc:
            logger.info("directory history unavailable: %s", exc)
            paths = []
        self._empty_by_cwd[str(exclude_path)] = not paths
        return paths

    def is_empty(self, exclude_path: Path | str) -> bool:
        key = str(exclude_path)
        cached = self._empty_by_cwd.get(key)
        if cached is not None:
            return cached
        return not self.directories(exclude_path)
