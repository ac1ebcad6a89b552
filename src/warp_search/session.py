"""Browsing sessions: per-user result set, page and sort mode."""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from warp_search.capture import PendingQueryCapture
from warp_search.catalog.store import CatalogStore
from warp_search.models import CatalogEntry, Position, SortMode
from warp_search.search import search
from warp_search.sorting import PositionResolver, format_distance, rank_by_distance, sort_alphabetically

PAGE_SIZE = 45


@dataclass(frozen=True, slots=True)
class BrowsingSession:
    """One rendered view of a result set.

    Sessions are never mutated: navigation, sort toggles and new searches
    build a replacement, so a session handed to a renderer stays stable.
    """

    result_set: tuple[CatalogEntry, ...]
    page_index: int = 0
    sort_mode: SortMode = SortMode.ALPHABETICAL
    reference_position: Position | None = None
    distance_cache: Mapping[str, float] = field(default_factory=dict, hash=False)
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "result_set", tuple(self.result_set))
        object.__setattr__(self, "distance_cache", MappingProxyType(dict(self.distance_cache)))

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.result_set) / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page_index < self.total_pages - 1

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 0

    def page_entries(self) -> tuple[CatalogEntry, ...]:
        start = self.page_index * self.page_size
        return self.result_set[start : start + self.page_size]

    def entry_at(self, slot: int) -> CatalogEntry | None:
        """Entry shown in ``slot`` of the current page, or ``None``."""
        if slot < 0 or slot >= self.page_size:
            return None
        index = self.page_index * self.page_size + slot
        if index >= len(self.result_set):
            return None
        return self.result_set[index]

    def distance_label(self, entry: CatalogEntry) -> str | None:
        if self.sort_mode is not SortMode.DISTANCE or entry.destination_id not in self.distance_cache:
            return None
        return format_distance(self.distance_cache[entry.destination_id])


class BrowsingSessionManager:
    """Builds and replaces browsing sessions, and fronts the query capture table."""

    def __init__(
        self,
        store: CatalogStore,
        *,
        position_resolver: PositionResolver | None = None,
        capture: PendingQueryCapture | None = None,
        page_size: int = PAGE_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._store = store
        self._position_resolver = position_resolver
        self._capture = capture or PendingQueryCapture()
        self._page_size = page_size
        self._logger = logger or logging.getLogger("warp_search.session")
        self._lock = threading.Lock()
        self._sessions: dict[Hashable, BrowsingSession] = {}

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def capture(self) -> PendingQueryCapture:
        return self._capture

    def open_browser(self, user: Hashable, reference_position: Position | None) -> BrowsingSession:
        entries = sort_alphabetically(self._store.all())
        session = self._publish(user, self._new_session(entries, reference_position))
        self._logger.info("browser_opened", extra={"user": str(user), "results": len(entries)})
        return session

    def open_search_results(
        self,
        user: Hashable,
        query: str,
        reference_position: Position | None,
    ) -> BrowsingSession:
        results = sort_alphabetically(search(self._store.all(), query))
        session = self._publish(user, self._new_session(results, reference_position))
        self._logger.info("search_executed", extra={"user": str(user), "query": query, "results": len(results)})
        return session

    def turn_page(self, user: Hashable, session: BrowsingSession, new_page_index: int) -> BrowsingSession:
        return self._publish(user, replace(session, page_index=new_page_index))

    def toggle_sort(self, user: Hashable, session: BrowsingSession) -> BrowsingSession:
        new_mode = session.sort_mode.toggled()
        if new_mode is SortMode.DISTANCE:
            ranked = rank_by_distance(session.result_set, session.reference_position, self._position_resolver)
            updated = replace(
                session,
                result_set=tuple(item.entry for item in ranked),
                page_index=0,
                sort_mode=new_mode,
                distance_cache={item.entry.destination_id: item.distance for item in ranked},
            )
        else:
            updated = replace(
                session,
                result_set=tuple(sort_alphabetically(session.result_set)),
                page_index=0,
                sort_mode=new_mode,
                distance_cache={},
            )

        self._logger.info("sort_mode_changed", extra={"user": str(user), "sort_mode": new_mode.value})
        return self._publish(user, updated)

    def current_session(self, user: Hashable) -> BrowsingSession | None:
        with self._lock:
            return self._sessions.get(user)

    def close(self, user: Hashable) -> None:
        with self._lock:
            self._sessions.pop(user, None)

    def disconnect(self, user: Hashable) -> None:
        self.close(user)
        self._capture.abandon(user)

    def begin_capture(self, user: Hashable) -> None:
        self._capture.begin(user)

    def commit_capture(self, user: Hashable, text: str) -> bool:
        return self._capture.commit(user, text)

    def consume_capture(self, user: Hashable) -> str | None:
        return self._capture.consume(user)

    def abandon_capture(self, user: Hashable) -> None:
        self._capture.abandon(user)

    def _new_session(self, entries: list[CatalogEntry], reference_position: Position | None) -> BrowsingSession:
        return BrowsingSession(
            result_set=tuple(entries),
            page_index=0,
            sort_mode=SortMode.ALPHABETICAL,
            reference_position=reference_position,
            page_size=self._page_size,
        )

    def _publish(self, user: Hashable, session: BrowsingSession) -> BrowsingSession:
        with self._lock:
            self._sessions[user] = session
        return session
