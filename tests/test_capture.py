from __future__ import annotations

import threading

from warp_search.capture import PendingQueryCapture


def _opened(*users: str) -> PendingQueryCapture:
    capture = PendingQueryCapture()
    for user in users:
        capture.begin(user)
    return capture


def test_consume_delivers_at_most_once() -> None:
    capture = _opened("steve")
    capture.commit("steve", "spawn")

    assert capture.consume("steve") == "spawn"
    assert capture.consume("steve") is None


def test_commit_overwrites_uncommitted_value() -> None:
    capture = _opened("steve")
    capture.commit("steve", "sp")
    capture.commit("steve", "spawn")

    assert capture.consume("steve") == "spawn"


def test_empty_commit_is_ignored() -> None:
    capture = _opened("steve")
    capture.commit("steve", "mine")

    assert capture.commit("steve", "") is False
    assert capture.consume("steve") == "mine"


def test_commit_without_open_capture_is_ignored() -> None:
    capture = PendingQueryCapture()

    assert capture.commit("steve", "spawn") is False
    assert capture.consume("steve") is None
    assert len(capture) == 0


def test_abandon_discards_and_closes_capture() -> None:
    capture = _opened("steve")
    capture.commit("steve", "shop")

    capture.abandon("steve")

    assert capture.consume("steve") is None
    assert capture.commit("steve", "shop") is False
    assert len(capture) == 0


def test_users_are_isolated() -> None:
    capture = _opened("steve", "alex")
    capture.commit("steve", "spawn")
    capture.commit("alex", "mine")

    capture.abandon("steve")

    assert capture.consume("steve") is None
    assert capture.consume("alex") == "mine"


def test_begin_discards_stale_value_and_consume_closes_capture() -> None:
    capture = _opened("steve")
    capture.commit("steve", "old")

    capture.begin("steve")
    assert len(capture) == 0

    assert capture.commit("steve", "new") is True
    assert capture.consume("steve") == "new"
    assert capture.commit("steve", "late") is False


def test_concurrent_consumers_receive_value_once() -> None:
    capture = _opened("steve")
    capture.commit("steve", "spawn")
    received: list[str] = []
    lock = threading.Lock()

    def _consume() -> None:
        value = capture.consume("steve")
        if value is not None:
            with lock:
                received.append(value)

    threads = [threading.Thread(target=_consume) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert received == ["spawn"]
