from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .models import Position

_logger = logging.getLogger("warp_search.positions")


class MappingPositionResolver:
    """Resolves destination ids from a prepared ``id -> Position`` mapping."""

    def __init__(self, positions: Mapping[str, Position]) -> None:
        self._positions = dict(positions)

    def resolve(self, destination_id: str) -> Position | None:
        return self._positions.get(destination_id)

    def __len__(self) -> int:
        return len(self._positions)


def parse_positions(document: Any) -> dict[str, Position]:
    """Read ``{id: {world, x, y, z}}``; entries without numeric x/z are ignored."""
    if not isinstance(document, Mapping):
        return {}

    positions: dict[str, Position] = {}
    for destination_id, raw in document.items():
        if not isinstance(raw, Mapping):
            continue
        try:
            position = Position(
                x=float(raw["x"]),
                y=float(raw.get("y", 0.0)),
                z=float(raw["z"]),
                world=str(raw["world"]) if raw.get("world") is not None else None,
            )
        except (KeyError, TypeError, ValueError):
            _logger.warning("position_invalid", extra={"destination_id": str(destination_id)})
            continue
        positions[str(destination_id)] = position
    return positions


def load_position_file(path: str | Path) -> MappingPositionResolver:
    target = Path(path).expanduser()
    with target.open("r", encoding="utf-8") as handle:
        document = yaml.safe_load(handle)
    positions = parse_positions(document)
    _logger.info("positions_loaded", extra={"path": str(target), "count": len(positions)})
    return MappingPositionResolver(positions)
