"""Thread-safe progress log shared between creation and build tasks."""

from __future__ import annotations

import logging
import threading

__all__ = ["ProgressLog"]


LOGGER = logging.getLogger(__name__)


class ProgressLog:
    """Append-only text buffer consumed by front-ends.

    Writers hold the lock only for the duration of a single append, so a
    reader taking a :meth:`snapshot` never observes a partial entry.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[str] = []

    def append(self, text: str) -> None:
        """Append ``text`` as one entry, newline terminated."""

        entry = text if text.endswith("\n") else f"{text}\n"
        with self._lock:
            self._entries.append(entry)
        for line in entry.splitlines():
            LOGGER.info(line)

    def snapshot(self) -> str:
        """Return everything appended so far."""

        with self._lock:
            return "".join(self._entries)

    def lines(self) -> tuple[str, ...]:
        return tuple(self.snapshot().splitlines())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
