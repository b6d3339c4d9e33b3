"""RadixVault Configuration Module

This module provides unified access to configuration models and settings
management for RadixVault.

- Settings: Main configuration facade
- Loader functions: get_config, load_settings, reload_config
- Domain models: App, Logging, GitHub, Cache settings
"""

from __future__ import annotations

from .loader import get_config, load_settings, reload_config
from .models import (
    AppSettings,
    CacheSettings,
    GitHubSettings,
    LoggingSettings,
    Settings,
)

__all__ = [
    "AppSettings",
    "CacheSettings",
    "GitHubSettings",
    "LoggingSettings",
    "Settings",
    "get_config",
    "load_settings",
    "reload_config",
]
