"""Dispatching entry activations to the game as teleport commands."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable
from enum import Enum
from typing import Protocol

from warp_search.adapters import GameCommand, GameCommandAdapter
from warp_search.models import CatalogEntry


class TeleportOutcome(str, Enum):
    """Result of one activation attempt."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class TeleportExecutor(Protocol):
    """Performs the actual relocation for a catalog entry."""

    def teleport(self, user: Hashable, entry: CatalogEntry) -> TeleportOutcome:
        """Move ``user`` to ``entry``'s destination and report the outcome."""


class CommandTeleportExecutor:
    """Renders a command template and sends it through a game command adapter.

    The template may reference ``{destination}``, ``{user}`` and ``{name}``.
    """

    def __init__(
        self,
        adapter: GameCommandAdapter,
        *,
        command_template: str = "warp {destination}",
        logger: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._command_template = command_template
        self._logger = logger or logging.getLogger("warp_search.teleport")

    def render(self, user: Hashable, entry: CatalogEntry) -> str:
        return self._command_template.format(destination=entry.destination_id, user=user, name=entry.name)

    def teleport(self, user: Hashable, entry: CatalogEntry) -> TeleportOutcome:
        command = self.render(user, entry)
        try:
            output = self._adapter.send(GameCommand(text=command, user=str(user), destination_id=entry.destination_id))
        except Exception:  # noqa: BLE001 - adapter failures are reported as outcomes.
            self._logger.exception("teleport_command_failed", extra={"user": str(user), "command": command})
            return TeleportOutcome.FAILED

        self._logger.info("teleport_command_sent", extra={"user": str(user), "command": command, "stdout": output})
        return TeleportOutcome.SUCCEEDED


class TeleportDispatcher:
    """Runs a blocking executor in a worker thread with a timeout."""

    def __init__(
        self,
        executor: TeleportExecutor,
        *,
        timeout_seconds: float = 5.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._executor = executor
        self._timeout_seconds = timeout_seconds
        self._logger = logger or logging.getLogger("warp_search.teleport")

    async def dispatch(self, user: Hashable, entry: CatalogEntry) -> TeleportOutcome:
        self._logger.info(
            "teleport_started",
            extra={"user": str(user), "entry_name": entry.name, "destination_id": entry.destination_id},
        )
        try:
            outcome = await asyncio.wait_for(
                asyncio.to_thread(self._executor.teleport, user, entry),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            self._logger.warning(
                "teleport_timeout",
                extra={"user": str(user), "destination_id": entry.destination_id, "timeout": self._timeout_seconds},
            )
            return TeleportOutcome.TIMED_OUT
        except Exception:  # noqa: BLE001 - executor failures are reported as outcomes.
            self._logger.exception("teleport_failed", extra={"user": str(user), "destination_id": entry.destination_id})
            return TeleportOutcome.FAILED

        self._logger.info(
            "teleport_finished",
            extra={"user": str(user), "entry_name": entry.name, "outcome": outcome.value},
        )
        return outcome
