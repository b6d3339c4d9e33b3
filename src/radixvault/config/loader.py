"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML
- Thread-safe singleton pattern for Settings instance
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from radixvault.config.models.settings import Settings
from radixvault.shared.constants import GitHubConfig
from radixvault.shared.errors import create_config_error

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("config/radixvault.toml"),
    Path("radixvault.toml"),
    Path.home() / ".radixvault" / "config.toml",
)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking pattern to ensure thread-safety
    while minimizing lock overhead.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance (thread-safe).

        Returns:
            The global Settings instance, loading it if necessary.
        """
        # First check (without lock for performance)
        if self._instance is None:
            # Second check (with lock for thread-safety)
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()

        return self._instance

    def reload_config(self) -> Settings:
        """Reload the global settings instance from .env, TOML and environment.

        Returns:
            The reloaded Settings instance.
        """
        with self._lock:
            self._instance = load_settings()

        return self._instance

    def reset(self) -> None:
        """Drop the cached instance so the next get_config() reloads."""
        with self._lock:
            self._instance = None


def _load_env_file(env_file: Path = Path(".env")) -> None:
    """Load environment variables from a .env file if one exists.

    Values already present in the environment win over the file.
    """
    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)


def _apply_token_from_env(settings: Settings) -> Settings:
    """Fill the GitHub token from GITHUB_PERSONAL_ACCESS_TOKEN when unset."""
    if settings.github.token:
        return settings

    token = os.getenv(GitHubConfig.TOKEN_ENV_VAR, "").strip()
    if token:
        settings.github.token = token
    return settings


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from TOML configuration file or environment.

    Args:
        config_path: Optional path to TOML configuration file. If None, tries
            the default locations and then plain environment variables.

    Returns:
        Settings instance loaded from the specified source

    Raises:
        ApplicationError: If the configuration file is missing or invalid
    """
    _load_env_file()

    try:
        if config_path:
            settings = Settings.from_toml_file(config_path)
        else:
            settings = next(
                (Settings.from_toml_file(path) for path in DEFAULT_CONFIG_PATHS if path.exists()),
                None,
            ) or Settings()
    except FileNotFoundError as e:
        raise create_config_error(
            f"Configuration file not found: {config_path}",
            config_key="config_path",
            operation="load_settings",
            original_error=e,
        ) from e
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration: {e.error_count()} validation error(s)",
            operation="load_settings",
            original_error=e,
        ) from e

    return _apply_token_from_env(settings)


# Global loader instance
_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the global settings instance (thread-safe).

    Returns:
        The global Settings instance, loading it if necessary.
    """
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload the global settings instance.

    Returns:
        The reloaded Settings instance.
    """
    return _loader.reload_config()


__all__ = [
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
]
