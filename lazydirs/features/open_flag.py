"""Lock-guarded open/closed flag shared between the UI thread and fetch workers."""

from __future__ import annotations

import threading


class OpenFlag:
    """A boolean that background completions may flip while keys are handled."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._open = False

    def is_set(self) -> bool:
        with self._lock:
            return self._open

    def try_open(self) -> bool:
        """Set the flag; returns ``False`` if it was already open."""
        with self._lock:
            if self._open:
                return False
            self._open = True
            return True

    def close(self) -> bool:
        """Clear the flag; returns whether it was open."""
        with self._lock:
            was_open = self._open
            self._open = False
            return was_open
