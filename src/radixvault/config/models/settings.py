"""RadixVault Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from radixvault.config.models.app_settings import AppSettings, LoggingSettings
from radixvault.config.models.cache_settings import CacheSettings
from radixvault.config.models.github_settings import GitHubSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings facade providing unified configuration access.

    Values come from (highest priority first) constructor arguments,
    ``RADIXVAULT_*`` environment variables (nested with ``__``, e.g.
    ``RADIXVAULT_CACHE__TTL``) and field defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RADIXVAULT_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file (the GitHub token is left out)."""

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(
            mode="json",
            exclude_none=True,
            exclude={"github": {"token"}},
        )

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)
