"""CLI entrypoint for Warp Search."""

from __future__ import annotations

import asyncio

import typer
import yaml
from rich import print

from warp_search.adapters import EchoGameCommandAdapter, MinescriptGameCommandAdapter, MinescriptUnavailableError
from warp_search.catalog import CatalogLoader, CatalogStore, ParseResult, YamlDocumentSource
from warp_search.config import settings
from warp_search.errors import CatalogError
from warp_search.markup import strip_markup
from warp_search.models import Position, SortMode
from warp_search.positions import load_position_file
from warp_search.service import WarpSearchService
from warp_search.session import BrowsingSession, BrowsingSessionManager
from warp_search.sorting import PositionResolver
from warp_search.telemetry.logging import configure_logging
from warp_search.teleport import CommandTeleportExecutor, TeleportDispatcher

app = typer.Typer(help="Search and browse WarpSystem warps")

CONSOLE_USER = "console"


def _build_game_adapter():
    backend = settings.game_adapter.lower()
    if backend == "minescript":
        try:
            return MinescriptGameCommandAdapter(command_prefix=settings.minescript_command_prefix)
        except MinescriptUnavailableError:
            return EchoGameCommandAdapter()
    return EchoGameCommandAdapter()


def _build_resolver(positions_file: str | None) -> PositionResolver | None:
    path = positions_file or settings.positions_file
    if not path:
        return None
    try:
        return load_position_file(path)
    except (OSError, yaml.YAMLError) as exc:
        print({"error": f"Unable to read positions file {path}: {exc}"})
        raise typer.Exit(code=1)


def _build_service(positions_file: str | None = None) -> WarpSearchService:
    configure_logging(settings.log_level)
    store = CatalogStore()
    loader = CatalogLoader(YamlDocumentSource(settings.source_path), store)
    sessions = BrowsingSessionManager(store, position_resolver=_build_resolver(positions_file))
    dispatcher = TeleportDispatcher(
        CommandTeleportExecutor(_build_game_adapter(), command_template=settings.teleport_command),
        timeout_seconds=settings.teleport_timeout_seconds,
    )
    return WarpSearchService(loader, sessions, dispatcher=dispatcher)


def _load(service: WarpSearchService) -> ParseResult:
    try:
        return service.load_catalog()
    except CatalogError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _position(x: float | None, y: float | None, z: float | None, world: str | None) -> Position | None:
    if x is None or z is None:
        return None
    return Position(x=x, y=y or 0.0, z=z, world=world)


def _render(session: BrowsingSession) -> dict:
    items = []
    for slot, entry in enumerate(session.page_entries()):
        item = {
            "slot": slot,
            "name": strip_markup(entry.display_label or entry.name),
            "destination": entry.destination_id,
            "category": entry.category,
        }
        label = session.distance_label(entry)
        if label is not None:
            item["distance"] = label
        items.append(item)

    return {
        "results": len(session.result_set),
        "page": session.page_index + 1,
        "pages": session.total_pages,
        "sort": session.sort_mode.value,
        "items": items,
    }


def _show(
    service: WarpSearchService,
    session: BrowsingSession,
    *,
    sort: SortMode,
    page: int,
) -> None:
    if sort is SortMode.DISTANCE:
        session = service.toggle_sort(CONSOLE_USER, session)
    if page > 1:
        last = max(session.total_pages - 1, 0)
        session = service.turn_page(CONSOLE_USER, session, min(page - 1, last))
    print(_render(session))


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "source_path": str(settings.source_path),
            "positions_file": settings.positions_file,
            "game_adapter": settings.game_adapter,
            "teleport_command": settings.teleport_command,
        }
    )


@app.command()
def count() -> None:
    """Load the catalog and report how many warps are usable."""
    service = _build_service()
    result = _load(service)
    print({"entries": service.entry_count(), "skipped": result.skipped_count})


@app.command()
def browse(
    x: float = typer.Option(None, help="Current X"),
    y: float = typer.Option(None, help="Current Y"),
    z: float = typer.Option(None, help="Current Z"),
    world: str = typer.Option(None, help="Current world name"),
    sort: SortMode = typer.Option(SortMode.ALPHABETICAL, help="alphabetical/distance"),
    page: int = typer.Option(1, min=1, help="1-based page number"),
    positions: str = typer.Option(None, help="YAML file with warp coordinates"),
) -> None:
    """List all warps, one page at a time."""
    service = _build_service(positions)
    _load(service)
    session = service.open_browser(CONSOLE_USER, _position(x, y, z, world))
    _show(service, session, sort=sort, page=page)


@app.command()
def search(
    query: str = typer.Argument(..., help="Space-separated search terms"),
    x: float = typer.Option(None, help="Current X"),
    y: float = typer.Option(None, help="Current Y"),
    z: float = typer.Option(None, help="Current Z"),
    world: str = typer.Option(None, help="Current world name"),
    sort: SortMode = typer.Option(SortMode.ALPHABETICAL, help="alphabetical/distance"),
    page: int = typer.Option(1, min=1, help="1-based page number"),
    positions: str = typer.Option(None, help="YAML file with warp coordinates"),
) -> None:
    """Search warps by name, label, lore and destination id."""
    service = _build_service(positions)
    _load(service)
    session = service.open_search_results(CONSOLE_USER, query, _position(x, y, z, world))
    _show(service, session, sort=sort, page=page)


@app.command()
def find() -> None:
    """Prompt for a query, then search with it."""
    service = _build_service()
    _load(service)
    service.begin_capture(CONSOLE_USER)
    try:
        text = typer.prompt("Search warps", default="", show_default=False)
        service.commit_capture(CONSOLE_USER, text.strip())
        session = service.submit_capture(CONSOLE_USER, None)
    finally:
        service.abandon_capture(CONSOLE_USER)
    if session is None:
        print({"search": None, "hint": "Nothing entered."})
        return
    print(_render(session))


@app.command()
def teleport(
    query: str = typer.Argument(..., help="Search terms; the first alphabetical match is used"),
) -> None:
    """Teleport to the first warp matching the query."""
    service = _build_service()
    _load(service)
    session = service.open_search_results(CONSOLE_USER, query, None)
    if not session.result_set:
        print({"teleport": None, "error": f"No warp matches {query!r}"})
        raise typer.Exit(code=1)

    outcome = asyncio.run(service.activate_entry(CONSOLE_USER, session, 0))
    print({"teleport": session.result_set[0].destination_id, "outcome": outcome.value if outcome else None})


if __name__ == "__main__":
    app()
