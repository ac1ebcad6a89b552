"""Tolerant conversion of an ActionIcons document into catalog entries.

The document has no schema enforced ahead of time. Each element of the
top-level ``Icons`` list is walked with explicit defaults and one required-field
check, producing either a :class:`CatalogEntry` or a :class:`SkippedEntry`.
Nothing in here raises for the batch as a whole.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from warp_search.catalog.registry import (
    KNOWN_ITEM_TYPES,
    LEGACY_PATTERN_IDS,
    PatternRegistry,
    VanillaPatternRegistry,
    match_dye_color,
    match_item_type,
)
from warp_search.models import DEFAULT_ITEM_TYPE, CatalogEntry, DecorationLayer

ICONS_KEY = "Icons"

_logger = logging.getLogger("warp_search.catalog.parser")


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """Diagnostic record for an element that did not become an entry."""

    index: int
    reason: str
    name: str | None = None


ParseOutcome = CatalogEntry | SkippedEntry


@dataclass(frozen=True, slots=True)
class ParseResult:
    entries: tuple[CatalogEntry, ...]
    skipped: tuple[SkippedEntry, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def parse_catalog(
    document: Any,
    legacy_patterns: Mapping[str, str] = LEGACY_PATTERN_IDS,
    *,
    pattern_registry: PatternRegistry | None = None,
    item_types: frozenset[str] = KNOWN_ITEM_TYPES,
    logger: logging.Logger | None = None,
) -> ParseResult:
    """Parse every element of the document's ``Icons`` list."""
    log = logger or _logger
    registry = pattern_registry or VanillaPatternRegistry()

    icons = document.get(ICONS_KEY) if isinstance(document, Mapping) else None
    if not isinstance(icons, list) or not icons:
        log.error("catalog_icons_missing", extra={"key": ICONS_KEY})
        return ParseResult(entries=())

    entries: list[CatalogEntry] = []
    skipped: list[SkippedEntry] = []
    for index, element in enumerate(icons):
        outcome = parse_entry(
            index,
            element,
            legacy_patterns,
            pattern_registry=registry,
            item_types=item_types,
            logger=log,
        )
        if isinstance(outcome, SkippedEntry):
            log.warning(
                "catalog_entry_skipped",
                extra={"index": outcome.index, "entry_name": outcome.name, "reason": outcome.reason},
            )
            skipped.append(outcome)
        else:
            entries.append(outcome)

    log.info("catalog_parsed", extra={"entries": len(entries), "skipped": len(skipped)})
    return ParseResult(entries=tuple(entries), skipped=tuple(skipped))


def parse_entry(
    index: int,
    element: Any,
    legacy_patterns: Mapping[str, str] = LEGACY_PATTERN_IDS,
    *,
    pattern_registry: PatternRegistry | None = None,
    item_types: frozenset[str] = KNOWN_ITEM_TYPES,
    logger: logging.Logger | None = None,
) -> ParseOutcome:
    """Turn one ``Icons`` element into an entry or a skip record."""
    if not isinstance(element, Mapping):
        return SkippedEntry(index=index, reason=f"not a map ({type(element).__name__})")

    try:
        return _extract(
            index,
            element,
            legacy_patterns,
            pattern_registry or VanillaPatternRegistry(),
            item_types,
            logger or _logger,
        )
    except Exception as exc:  # noqa: BLE001 - one bad element must not abort the batch.
        return SkippedEntry(index=index, reason=f"{type(exc).__name__}: {exc}", name=_scalar_str(element.get("name")))


def _extract(
    index: int,
    icon: Mapping[str, Any],
    legacy_patterns: Mapping[str, str],
    pattern_registry: PatternRegistry,
    item_types: frozenset[str],
    log: logging.Logger,
) -> ParseOutcome:
    name = _scalar_str(icon.get("name"))
    if not name:
        return SkippedEntry(index=index, reason="missing name")

    item = icon.get("item")
    if not isinstance(item, Mapping):
        item = None

    item_type = DEFAULT_ITEM_TYPE
    display_label = name
    description_lines: list[str] = []
    icon_hint: str | None = None
    layers: list[DecorationLayer] | None = None

    if item is not None:
        type_tag = _scalar_str(item.get("Type"))
        if type_tag:
            matched = match_item_type(type_tag, item_types)
            if matched is None:
                log.warning(
                    "catalog_item_type_unknown",
                    extra={"entry_name": name, "item_type": type_tag, "fallback": DEFAULT_ITEM_TYPE},
                )
            else:
                item_type = matched

        display_label = _scalar_str(item.get("Name")) or name
        description_lines = _string_list(item.get("Lore"))
        if "SkullOwner" in item:
            icon_hint = _scalar_str(item.get("SkullOwner"))
        if "Banner" in item:
            layers = _decoration_layers(name, item.get("Banner"), legacy_patterns, pattern_registry, log)

    destination_id = _destination_id(icon.get("actions"))
    if not destination_id:
        return SkippedEntry(index=index, reason="no destination id", name=name)

    return CatalogEntry(
        name=name,
        destination_id=destination_id,
        display_label=display_label,
        description_lines=tuple(description_lines),
        usage_count=_non_negative_int(icon.get("performed")),
        category=_scalar_str(icon.get("page")) or "",
        icon_hint=icon_hint,
        decoration_layers=tuple(layers) if layers else None,
        item_type=item_type,
    )


def _destination_id(actions: Any) -> str | None:
    # actions[0] -> value -> destination -> id
    if not isinstance(actions, list) or not actions:
        return None
    first = actions[0]
    if not isinstance(first, Mapping):
        return None
    value = first.get("value")
    if not isinstance(value, Mapping):
        return None
    destination = value.get("destination")
    if not isinstance(destination, Mapping):
        return None
    destination_id = destination.get("id")
    if not isinstance(destination_id, str) or not destination_id:
        return None
    return destination_id


def _decoration_layers(
    name: str,
    raw_layers: Any,
    legacy_patterns: Mapping[str, str],
    pattern_registry: PatternRegistry,
    log: logging.Logger,
) -> list[DecorationLayer] | None:
    if not isinstance(raw_layers, list) or not raw_layers:
        return None

    layers: list[DecorationLayer] = []
    for raw in raw_layers:
        if not isinstance(raw, Mapping):
            continue
        color_value = raw.get("color")
        pattern_value = raw.get("pattern")
        if not isinstance(color_value, str) or not isinstance(pattern_value, str):
            continue

        color = match_dye_color(color_value)
        if color is None:
            log.warning("catalog_banner_color_invalid", extra={"entry_name": name, "color": color_value})
            continue

        canonical = legacy_patterns.get(pattern_value.strip().lower())
        pattern = pattern_registry.resolve(canonical) if canonical else None
        if pattern is None:
            log.warning("catalog_banner_pattern_invalid", extra={"entry_name": name, "pattern": pattern_value})
            continue

        layers.append(DecorationLayer(color=color, pattern=pattern))

    return layers or None


def _scalar_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    return None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    lines: list[str] = []
    for item in value:
        text = _scalar_str(item)
        if text is not None:
            lines.append(text)
    return lines


def _non_negative_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(0, int(value))
