"""Application and logging configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from radixvault.shared.constants import LibrarySelection, Logging

_VALID_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Log level")
    file: str | None = Field(default=None, description="Optional JSON-lines log file")
    rich_console: bool = Field(default=True, description="Use rich console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        upper = v.upper()
        if upper not in _VALID_LEVELS:
            msg = f"Invalid log level: {v}. Must be one of {sorted(_VALID_LEVELS)}"
            raise ValueError(msg)
        return upper


class AppSettings(BaseModel):
    """Application-wide settings."""

    name: str = Field(default="RadixVault", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    default_library: LibrarySelection = Field(
        default=LibrarySelection.ALL,
        description="Library selection used when none is given",
    )


__all__ = ["AppSettings", "LoggingSettings"]
