"""Free-text search across warp names, labels, lore and destination ids.

A query is split on whitespace; an entry matches when every term is a
case-insensitive substring of at least one searchable field. Matches keep the
snapshot's order, there is no scoring.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from warp_search.markup import strip_markup
from warp_search.models import CatalogEntry


def normalize_query(query: str) -> list[str]:
    return query.lower().split()


def search(entries: Sequence[CatalogEntry], query: str) -> list[CatalogEntry]:
    terms = normalize_query(query)
    if not terms:
        return list(entries)
    return [entry for entry in entries if matches(entry, terms)]


def matches(entry: CatalogEntry, terms: Iterable[str]) -> bool:
    fields = searchable_fields(entry)
    return all(any(term in field for field in fields) for term in terms)


def searchable_fields(entry: CatalogEntry) -> tuple[str, ...]:
    return (
        entry.name.lower(),
        strip_markup(entry.display_label or "").lower(),
        entry.destination_id.lower(),
        *(strip_markup(line).lower() for line in entry.description_lines),
    )
