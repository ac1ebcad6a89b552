"""Per-user pending search query captured from the single-field input."""

from __future__ import annotations

import threading
from collections.abc import Hashable


class PendingQueryCapture:
    """Holds at most one uncommitted query per user.

    Text is only accepted between ``begin`` and the end of the capture.
    ``commit`` overwrites, ``consume`` delivers at most once, and ``abandon``
    must be called when the input is closed or the user disconnects so the
    table never outlives the user's interest in it. All operations share one
    lock so they are atomic relative to each other.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: dict[Hashable, str] = {}
        self._open: set[Hashable] = set()

    def begin(self, user: Hashable) -> None:
        with self._lock:
            self._open.add(user)
            self._pending.pop(user, None)

    def commit(self, user: Hashable, text: str) -> bool:
        """Store ``text`` for an open capture; ``False`` when it was ignored."""
        if not text:
            return False
        with self._lock:
            if user not in self._open:
                return False
            self._pending[user] = text
        return True

    def consume(self, user: Hashable) -> str | None:
        with self._lock:
            text = self._pending.pop(user, None)
            if text is not None:
                self._open.discard(user)
            return text

    def abandon(self, user: Hashable) -> None:
        with self._lock:
            self._pending.pop(user, None)
            self._open.discard(user)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)
