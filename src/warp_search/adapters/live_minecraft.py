"""Teleport transport backed by the minescript mod.

The mod is only importable inside a running client, so the entrypoint is
looked up lazily when the adapter is built.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Callable

from warp_search.adapters.game_command import GameCommand

MINESCRIPT_ENTRYPOINTS = ("execute", "run", "command", "chat_command")


class MinescriptUnavailableError(RuntimeError):
    """minescript is missing, or exposes none of the known entrypoints."""


def resolve_minescript_entrypoint(module_name: str = "minescript") -> Callable[[str], object]:
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise MinescriptUnavailableError(f"Cannot import {module_name!r}; is the client running with the mod?") from exc

    for name in MINESCRIPT_ENTRYPOINTS:
        entrypoint = getattr(module, name, None)
        if callable(entrypoint):
            return entrypoint

    raise MinescriptUnavailableError(
        f"{module_name!r} has none of: {', '.join(MINESCRIPT_ENTRYPOINTS)}"
    )


@dataclass(slots=True)
class MinescriptGameCommandAdapter:
    command_prefix: str = "/"
    entrypoint: Callable[[str], object] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.entrypoint is None:
            self.entrypoint = resolve_minescript_entrypoint()

    def format(self, payload: GameCommand) -> str:
        text = payload.text.strip()
        if self.command_prefix and not text.startswith(self.command_prefix):
            text = self.command_prefix + text
        return text

    def send(self, payload: GameCommand) -> str:
        output = self.entrypoint(self.format(payload))
        return "" if output is None else str(output)
