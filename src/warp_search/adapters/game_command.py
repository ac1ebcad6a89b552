"""Transports that carry rendered teleport commands into the game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class GameCommand:
    """One rendered command, tagged with who it moves and where."""

    text: str
    user: str | None = None
    destination_id: str | None = None


class GameCommandAdapter(Protocol):
    def send(self, payload: GameCommand) -> str | None:
        """Run ``payload`` in the game and return whatever it printed."""


class EchoGameCommandAdapter:
    """Dry-run transport: remembers each command instead of running it."""

    def __init__(self) -> None:
        self.sent: list[GameCommand] = []

    def send(self, payload: GameCommand) -> str:
        self.sent.append(payload)
        return f"executed: {payload.text}"
