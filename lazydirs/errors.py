"""Exception types for degradable failures.

None of these escape to the UI: callers log them and fall back to an empty
group or an unchanged list.
"""

from __future__ import annotations


class LazyDirsError(Exception):
    """Base class for lazydirs failures."""


class SourceUnavailableError(LazyDirsError):
    """A directory or history collaborator could not enumerate its data."""


class MalformedPinnedDataError(LazyDirsError):
    """Pinned-directories content matched none of the known record shapes."""


class ScorerBusyError(LazyDirsError):
    """A fuzzy scorer was re-entered while a previous call was still running."""
