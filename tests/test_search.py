from __future__ import annotations

from warp_search.models import CatalogEntry
from warp_search.search import search

SPAWN = CatalogEntry(name="Spawn", destination_id="spawn", description_lines=("&7Main area",))
MINE = CatalogEntry(name="Mine Entrance", destination_id="mine1")
SHOP = CatalogEntry(
    name="market",
    destination_id="shop_district",
    display_label="&aPeter's &lMarket",
    description_lines=("Run by Mary", "&eOpen daily"),
)
CATALOG = [SPAWN, MINE, SHOP]


def test_example_queries() -> None:
    assert search(CATALOG, "spawn") == [SPAWN]
    assert search(CATALOG, "main area") == [SPAWN]
    assert search(CATALOG, "nonexistent") == []


def test_empty_and_blank_queries_return_everything_in_order() -> None:
    assert search(CATALOG, "") == CATALOG
    assert search(CATALOG, "   \t ") == CATALOG
    assert search([], "") == []


def test_terms_are_anded_across_fields() -> None:
    assert search(CATALOG, "peter mary") == [SHOP]
    assert search(CATALOG, "peter spawn") == []


def test_term_order_does_not_change_matches() -> None:
    assert set(search(CATALOG, "open district")) == set(search(CATALOG, "district open"))


def test_markup_is_ignored_when_matching() -> None:
    assert search(CATALOG, "peter's market") == [SHOP]
    assert search(CATALOG, "&a") == []
    assert search(CATALOG, "eopen") == []


def test_case_insensitive_substrings_and_single_characters() -> None:
    assert search(CATALOG, "MINE1") == [MINE]
    assert search(CATALOG, "trance") == [MINE]
    assert search(CATALOG, "x") == []
    assert search(CATALOG, "a") == CATALOG


def test_duplicate_terms_are_harmless() -> None:
    assert search(CATALOG, "spawn spawn SPAWN") == [SPAWN]
