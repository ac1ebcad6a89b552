"""Transports for teleport commands."""

from .game_command import EchoGameCommandAdapter, GameCommand, GameCommandAdapter
from .live_minecraft import MinescriptGameCommandAdapter, MinescriptUnavailableError, resolve_minescript_entrypoint

__all__ = [
    "EchoGameCommandAdapter",
    "GameCommand",
    "GameCommandAdapter",
    "MinescriptGameCommandAdapter",
    "MinescriptUnavailableError",
    "resolve_minescript_entrypoint",
]
