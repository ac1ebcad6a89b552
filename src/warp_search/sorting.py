"""Alphabetical and distance ordering of catalog entries."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from warp_search.models import CatalogEntry, Position

# Maximal float used as "distance could not be computed"; sorts after every real distance.
UNKNOWN_DISTANCE = sys.float_info.max

_logger = logging.getLogger("warp_search.sorting")


class PositionResolver(Protocol):
    """Maps a destination id to a position, or ``None`` when unresolved."""

    def resolve(self, destination_id: str) -> Position | None:
        """Return the destination's position."""


@dataclass(frozen=True, slots=True)
class RankedEntry:
    entry: CatalogEntry
    distance: float = UNKNOWN_DISTANCE

    @property
    def known(self) -> bool:
        return is_known_distance(self.distance)


def is_known_distance(value: float) -> bool:
    return value != UNKNOWN_DISTANCE and math.isfinite(value)


def name_key(entry: CatalogEntry) -> str:
    return entry.name.lower()


def sort_alphabetically(entries: Iterable[CatalogEntry]) -> list[CatalogEntry]:
    return sorted(entries, key=name_key)


def horizontal_distance(origin: Position, target: Position) -> float:
    """Distance on the x/z plane; height and world are ignored."""
    return math.dist((origin.x, origin.z), (target.x, target.z))


def rank_by_distance(
    entries: Iterable[CatalogEntry],
    reference: Position | None,
    resolver: PositionResolver | None,
) -> list[RankedEntry]:
    """Order entries nearest-first relative to ``reference``.

    Without a reference position or a resolver every entry is unknown and the
    result is alphabetical. Unknown entries always trail the resolved ones and
    are ordered by name among themselves.
    """
    if reference is None or resolver is None:
        return [RankedEntry(entry) for entry in sort_alphabetically(entries)]

    ranked = [RankedEntry(entry, _distance_to(entry, reference, resolver)) for entry in entries]
    ranked.sort(key=_rank_key)
    return ranked


def _distance_to(entry: CatalogEntry, reference: Position, resolver: PositionResolver) -> float:
    try:
        target = resolver.resolve(entry.destination_id)
    except Exception:  # noqa: BLE001 - resolver failure is a per-entry outcome.
        _logger.exception("position_resolve_failed", extra={"destination_id": entry.destination_id})
        return UNKNOWN_DISTANCE
    if target is None:
        return UNKNOWN_DISTANCE
    distance = horizontal_distance(reference, target)
    return distance if math.isfinite(distance) else UNKNOWN_DISTANCE


def _rank_key(ranked: RankedEntry) -> tuple[bool, float, str]:
    if ranked.known:
        return (False, ranked.distance, "")
    return (True, UNKNOWN_DISTANCE, name_key(ranked.entry))


def format_distance(value: float) -> str:
    """Compact label: ``"23 blocks"``, ``"4K blocks"``, ``"2.6M blocks"``, ``"Unknown"``."""
    if not is_known_distance(value):
        return "Unknown"

    rounded = _round_half_up(value)
    if rounded < 1_000:
        return f"{rounded} blocks"
    if rounded < 1_000_000:
        return f"{_round_half_up(rounded / 1_000)}K blocks"

    if rounded % 1_000_000 == 0:
        return f"{rounded // 1_000_000}M blocks"
    tenths = _round_half_up(rounded / 100_000)
    return f"{tenths // 10}.{tenths % 10}M blocks"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
