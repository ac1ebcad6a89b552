from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable

from .catalog import CatalogLoader, CatalogStore, ParseResult
from .errors import CatalogUnavailableError
from .models import CatalogEntry, Position
from .session import BrowsingSession, BrowsingSessionManager
from .teleport import TeleportDispatcher, TeleportOutcome


class WarpSearchService:
    """Public surface used by the command layer and the reload trigger."""

    def __init__(
        self,
        loader: CatalogLoader,
        sessions: BrowsingSessionManager,
        *,
        dispatcher: TeleportDispatcher | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.loader = loader
        self.sessions = sessions
        self.dispatcher = dispatcher
        self._logger = logger or logging.getLogger("warp_search.service")

    @property
    def store(self) -> CatalogStore:
        return self.loader.store

    def load_catalog(self) -> ParseResult:
        return self.loader.load()

    def reload_catalog(self) -> ParseResult:
        result = self.loader.reload()
        self._logger.info("catalog_reloaded", extra={"entries": self.entry_count()})
        return result

    async def reload_catalog_async(self) -> ParseResult:
        return await asyncio.to_thread(self.reload_catalog)

    def entry_count(self) -> int:
        return self.store.count()

    def open_browser(self, user: Hashable, position: Position | None) -> BrowsingSession:
        self._require_catalog()
        return self.sessions.open_browser(user, position)

    def open_search_results(self, user: Hashable, query: str, position: Position | None) -> BrowsingSession:
        self._require_catalog()
        return self.sessions.open_search_results(user, query, position)

    def turn_page(self, user: Hashable, session: BrowsingSession, new_page_index: int) -> BrowsingSession:
        return self.sessions.turn_page(user, session, new_page_index)

    def toggle_sort(self, user: Hashable, session: BrowsingSession) -> BrowsingSession:
        return self.sessions.toggle_sort(user, session)

    def begin_capture(self, user: Hashable) -> None:
        self.sessions.begin_capture(user)

    def commit_capture(self, user: Hashable, text: str) -> bool:
        return self.sessions.commit_capture(user, text)

    def consume_capture(self, user: Hashable) -> str | None:
        return self.sessions.consume_capture(user)

    def abandon_capture(self, user: Hashable) -> None:
        self.sessions.abandon_capture(user)

    def submit_capture(self, user: Hashable, position: Position | None) -> BrowsingSession | None:
        """Run the captured query, if any. ``None`` means nothing was pending."""
        query = self.consume_capture(user)
        if not query:
            return None
        return self.open_search_results(user, query, position)

    def disconnect(self, user: Hashable) -> None:
        self.sessions.disconnect(user)

    async def activate_entry(self, user: Hashable, session: BrowsingSession, slot: int) -> TeleportOutcome | None:
        """Teleport ``user`` to the entry in ``slot``; ``None`` for an empty slot."""
        entry = session.entry_at(slot)
        if entry is None:
            return None
        return await self.teleport(user, entry)

    async def teleport(self, user: Hashable, entry: CatalogEntry) -> TeleportOutcome:
        if self.dispatcher is None:
            self._logger.warning("teleport_unavailable", extra={"user": str(user), "entry_name": entry.name})
            return TeleportOutcome.FAILED
        self.sessions.close(user)
        return await self.dispatcher.dispatch(user, entry)

    def _require_catalog(self) -> None:
        if self.entry_count() == 0:
            raise CatalogUnavailableError("No warps are loaded; check the ActionIcons document and reload.")
