"""Configuration domain models."""

from __future__ import annotations

from .app_settings import AppSettings, LoggingSettings
from .cache_settings import CacheSettings
from .github_settings import GitHubSettings
from .settings import Settings

__all__ = [
    "AppSettings",
    "CacheSettings",
    "GitHubSettings",
    "LoggingSettings",
    "Settings",
]
