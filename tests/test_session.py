from __future__ import annotations

from warp_search.catalog import CatalogStore
from warp_search.models import CatalogEntry, Position, SortMode
from warp_search.positions import MappingPositionResolver
from warp_search.session import BrowsingSession, BrowsingSessionManager
from warp_search.sorting import UNKNOWN_DISTANCE


def _entries(count: int) -> list[CatalogEntry]:
    return [CatalogEntry(name=f"warp{index:02d}", destination_id=f"w{index}") for index in range(count)]


def _manager(entries: list[CatalogEntry], resolver=None, page_size: int = 5) -> BrowsingSessionManager:
    return BrowsingSessionManager(CatalogStore(entries), position_resolver=resolver, page_size=page_size)


def test_open_browser_sorts_alphabetically_at_first_page() -> None:
    entries = [
        CatalogEntry(name="zeta", destination_id="z"),
        CatalogEntry(name="Alpha", destination_id="a"),
        CatalogEntry(name="beta", destination_id="b"),
    ]
    manager = _manager(entries)
    here = Position(1.0, 2.0, 3.0)

    session = manager.open_browser("steve", here)

    assert [entry.name for entry in session.result_set] == ["Alpha", "beta", "zeta"]
    assert session.page_index == 0
    assert session.sort_mode is SortMode.ALPHABETICAL
    assert session.reference_position == here
    assert dict(session.distance_cache) == {}
    assert manager.current_session("steve") is session


def test_open_search_results_filters_then_sorts() -> None:
    entries = [
        CatalogEntry(name="Shop West", destination_id="w"),
        CatalogEntry(name="arena", destination_id="arena"),
        CatalogEntry(name="shop east", destination_id="e"),
    ]
    manager = _manager(entries)

    session = manager.open_search_results("alex", "shop", None)

    assert [entry.name for entry in session.result_set] == ["shop east", "Shop West"]


def test_turn_page_keeps_order_and_mode() -> None:
    manager = _manager(_entries(12))
    first = manager.open_browser("steve", None)

    second = manager.turn_page("steve", first, 2)

    assert second.page_index == 2
    assert second.result_set == first.result_set
    assert first.page_index == 0
    assert [entry.name for entry in second.page_entries()] == ["warp10", "warp11"]
    assert second.has_previous_page is True
    assert second.has_next_page is False
    assert manager.current_session("steve") is second


def test_page_helpers() -> None:
    session = BrowsingSession(result_set=tuple(_entries(11)), page_index=1, page_size=5)

    assert session.total_pages == 3
    assert session.entry_at(0).name == "warp05"
    assert session.entry_at(4).name == "warp09"
    assert session.entry_at(5) is None
    assert session.entry_at(-1) is None
    assert BrowsingSession(result_set=()).total_pages == 0


def test_toggle_sort_to_distance_fills_cache_and_resets_page() -> None:
    entries = _entries(7)
    resolver = MappingPositionResolver({"w6": Position(1.0, 0.0, 1.0), "w0": Position(500.0, 0.0, 0.0)})
    manager = _manager(entries, resolver)
    browsing = manager.turn_page("steve", manager.open_browser("steve", Position(0.0, 0.0, 0.0)), 1)

    ranked = manager.toggle_sort("steve", browsing)

    assert ranked.sort_mode is SortMode.DISTANCE
    assert ranked.page_index == 0
    assert [entry.destination_id for entry in ranked.result_set][:3] == ["w6", "w0", "w1"]
    assert ranked.distance_cache["w0"] == 500.0
    assert ranked.distance_cache["w1"] == UNKNOWN_DISTANCE
    assert ranked.distance_label(ranked.result_set[1]) == "500 blocks"
    assert ranked.distance_label(ranked.result_set[2]) == "Unknown"


def test_toggle_sort_back_to_alphabetical_drops_cache() -> None:
    manager = _manager(_entries(7), MappingPositionResolver({"w3": Position(0.0, 0.0, 0.0)}))
    ranked = manager.toggle_sort("steve", manager.open_browser("steve", Position(0.0, 0.0, 0.0)))
    paged = manager.turn_page("steve", ranked, 1)

    alphabetical = manager.toggle_sort("steve", paged)

    assert alphabetical.sort_mode is SortMode.ALPHABETICAL
    assert alphabetical.page_index == 0
    assert dict(alphabetical.distance_cache) == {}
    assert alphabetical.distance_label(alphabetical.result_set[0]) is None
    assert [entry.name for entry in alphabetical.result_set] == [f"warp{index:02d}" for index in range(7)]


def test_toggle_sort_without_position_is_alphabetical_with_unknown_distances() -> None:
    manager = _manager(_entries(3), MappingPositionResolver({"w0": Position(0.0, 0.0, 0.0)}))

    ranked = manager.toggle_sort("steve", manager.open_browser("steve", None))

    assert [entry.name for entry in ranked.result_set] == ["warp00", "warp01", "warp02"]
    assert set(ranked.distance_cache.values()) == {UNKNOWN_DISTANCE}


def test_toggle_sort_always_resets_page() -> None:
    manager = _manager(_entries(30), page_size=5)
    session = manager.open_browser("steve", None)

    for page in range(6):
        session = manager.toggle_sort("steve", manager.turn_page("steve", session, page))
        assert session.page_index == 0


def test_reload_does_not_disturb_existing_session() -> None:
    store = CatalogStore(_entries(3))
    manager = BrowsingSessionManager(store)
    session = manager.open_browser("steve", None)

    store.replace([])

    assert len(manager.turn_page("steve", session, 0).result_set) == 3


def test_close_and_disconnect_release_user_state() -> None:
    manager = _manager(_entries(2))
    manager.open_browser("steve", None)
    manager.begin_capture("steve")
    manager.commit_capture("steve", "spawn")

    manager.disconnect("steve")

    assert manager.current_session("steve") is None
    assert manager.consume_capture("steve") is None
    assert len(manager.capture) == 0


def test_sessions_are_hashable_and_compare_by_value() -> None:
    manager = _manager(_entries(3), MappingPositionResolver({"w1": Position(1.0, 0.0, 0.0)}))
    ranked = manager.toggle_sort("steve", manager.open_browser("steve", Position(0.0, 0.0, 0.0)))
    again = BrowsingSession(
        result_set=ranked.result_set,
        sort_mode=SortMode.DISTANCE,
        reference_position=ranked.reference_position,
        distance_cache=dict(ranked.distance_cache),
        page_size=ranked.page_size,
    )

    assert again == ranked
    assert hash(again) == hash(ranked)
    assert len({ranked, again}) == 1
