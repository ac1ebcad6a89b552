"""Runtime configuration for Warp Search."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_logger = logging.getLogger("warp_search.config")

DEFAULT_DATA_FOLDER = "plugins/WarpSystem"
DEFAULT_ACTIONICONS_FILE = "ActionIcons.yml"


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="WARP_SEARCH_", env_file=".env", extra="ignore")

    app_name: str = "warp-search"
    log_level: str = "INFO"
    warpsystem_data_folder: str = Field(
        default=DEFAULT_DATA_FOLDER,
        description="Folder holding the WarpSystem data files.",
    )
    actionicons_file: str = Field(
        default=DEFAULT_ACTIONICONS_FILE,
        description="File name of the ActionIcons document inside the data folder.",
    )
    positions_file: str | None = Field(
        default=None,
        description="Optional YAML file mapping destination ids to coordinates.",
    )
    game_adapter: str = "echo"
    minescript_command_prefix: str = "/"
    teleport_command: str = "warp {destination}"
    teleport_timeout_seconds: float = Field(default=5.0, gt=0)

    @field_validator("warpsystem_data_folder", mode="before")
    @classmethod
    def _default_data_folder(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            _logger.warning("config_value_empty", extra={"field": "warpsystem_data_folder"})
            return DEFAULT_DATA_FOLDER
        return value

    @field_validator("actionicons_file", mode="before")
    @classmethod
    def _default_actionicons_file(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            _logger.warning("config_value_empty", extra={"field": "actionicons_file"})
            return DEFAULT_ACTIONICONS_FILE
        return value

    @property
    def source_path(self) -> Path:
        return Path(self.warpsystem_data_folder).expanduser() / self.actionicons_file


settings = Settings()
