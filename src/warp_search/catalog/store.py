"""Thread-safe holder for the current catalog snapshot."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from warp_search.models import CatalogEntry


class CatalogStore:
    """Keeps one immutable snapshot and swaps it atomically on reload.

    Snapshots are tuples, so callers may iterate what :meth:`all` returned
    without holding the lock; a later :meth:`replace` never touches it.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._lock = threading.Lock()
        self._snapshot: tuple[CatalogEntry, ...] = tuple(entries)

    def replace(self, entries: Iterable[CatalogEntry]) -> None:
        snapshot = tuple(entries)
        with self._lock:
            self._snapshot = snapshot

    def all(self) -> tuple[CatalogEntry, ...]:
        with self._lock:
            return self._snapshot

    def count(self) -> int:
        with self._lock:
            return len(self._snapshot)
