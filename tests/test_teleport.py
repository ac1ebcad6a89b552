from __future__ import annotations

import asyncio
import time

from warp_search.adapters import EchoGameCommandAdapter
from warp_search.models import CatalogEntry
from warp_search.teleport import CommandTeleportExecutor, TeleportDispatcher, TeleportOutcome

SPAWN = CatalogEntry(name="Spawn", destination_id="spawn")


class RecordingAdapter:
    def __init__(self) -> None:
        self.commands: list[str] = []

    def send(self, payload):
        self.commands.append(payload.text)
        return "ok"


class FailingAdapter:
    def send(self, payload):
        raise RuntimeError("boom")


class SlowExecutor:
    def teleport(self, user, entry):
        time.sleep(0.2)
        return TeleportOutcome.SUCCEEDED


def test_executor_renders_command_template() -> None:
    adapter = RecordingAdapter()
    executor = CommandTeleportExecutor(adapter, command_template="execute as {user} run warp {destination}")

    outcome = executor.teleport("steve", SPAWN)

    assert outcome == TeleportOutcome.SUCCEEDED
    assert adapter.commands == ["execute as steve run warp spawn"]


def test_executor_reports_adapter_failure() -> None:
    executor = CommandTeleportExecutor(FailingAdapter())

    assert executor.teleport("steve", SPAWN) == TeleportOutcome.FAILED


def test_dispatcher_runs_executor() -> None:
    adapter = EchoGameCommandAdapter()
    dispatcher = TeleportDispatcher(CommandTeleportExecutor(adapter), timeout_seconds=1)

    assert asyncio.run(dispatcher.dispatch("steve", SPAWN)) == TeleportOutcome.SUCCEEDED
    assert [(sent.text, sent.user, sent.destination_id) for sent in adapter.sent] == [("warp spawn", "steve", "spawn")]


def test_dispatcher_times_out() -> None:
    dispatcher = TeleportDispatcher(SlowExecutor(), timeout_seconds=0.01)

    assert asyncio.run(dispatcher.dispatch("steve", SPAWN)) == TeleportOutcome.TIMED_OUT
