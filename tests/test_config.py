from __future__ import annotations

from pathlib import Path

from warp_search.config import DEFAULT_ACTIONICONS_FILE, DEFAULT_DATA_FOLDER, Settings


def test_defaults_point_at_warpsystem_folder(monkeypatch) -> None:
    monkeypatch.delenv("WARP_SEARCH_WARPSYSTEM_DATA_FOLDER", raising=False)
    monkeypatch.delenv("WARP_SEARCH_ACTIONICONS_FILE", raising=False)

    config = Settings(_env_file=None)

    assert config.source_path == Path(DEFAULT_DATA_FOLDER) / DEFAULT_ACTIONICONS_FILE


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WARP_SEARCH_WARPSYSTEM_DATA_FOLDER", str(tmp_path))
    monkeypatch.setenv("WARP_SEARCH_TELEPORT_COMMAND", "tp {user} {destination}")

    config = Settings(_env_file=None)

    assert config.source_path == tmp_path / DEFAULT_ACTIONICONS_FILE
    assert config.teleport_command == "tp {user} {destination}"


def test_empty_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("WARP_SEARCH_WARPSYSTEM_DATA_FOLDER", "  ")
    monkeypatch.setenv("WARP_SEARCH_ACTIONICONS_FILE", "")

    config = Settings(_env_file=None)

    assert config.warpsystem_data_folder == DEFAULT_DATA_FOLDER
    assert config.actionicons_file == DEFAULT_ACTIONICONS_FILE
