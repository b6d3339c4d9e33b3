"""
RadixVault Constants Module

This module provides centralized constants for the RadixVault application.
All magic values and configuration constants are defined here to ensure
consistency across the codebase.
"""

from .cache import CacheConfig
from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from .github import GitHubConfig, RepositoryPaths
from .library import (
    ColorScaleConfig,
    ComponentType,
    Library,
    LibrarySelection,
    Package,
    PackageManager,
)
from .network import HTTPStatusCodes, NetworkConfig
from .system import BASE_DAY, BASE_HOUR, BASE_MINUTE, BASE_SECOND, Logging

__all__ = [
    "BASE_DAY",
    "BASE_HOUR",
    "BASE_MINUTE",
    "BASE_SECOND",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "CacheConfig",
    "ColorScaleConfig",
    "ComponentType",
    "GitHubConfig",
    "HTTPStatusCodes",
    "Library",
    "LibrarySelection",
    "Logging",
    "NetworkConfig",
    "Package",
    "PackageManager",
    "RepositoryPaths",
]
