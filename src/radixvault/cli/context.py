"""
CLI Context Management Module

Holds the global options parsed by the Typer callback in a ContextVar so
every command sees the same values.
"""

from __future__ import annotations

import contextvars
from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """
    CLI context model for managing global state.

    Attributes:
        log_level: Logging level
        json_output: Whether to output in JSON format
        github_token: Token given on the command line, if any
    """

    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")
    json_output: bool = Field(default=False, description="Whether to output in JSON format")
    github_token: str | None = Field(default=None, repr=False, description="GitHub token")


_cli_context: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "radixvault_cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """Return the current CLI context (defaults if the callback did not run)."""
    context = _cli_context.get()
    return context if context is not None else CliContext()


def set_cli_context(context: CliContext) -> None:
    _cli_context.set(context)


__all__ = ["CliContext", "LogLevel", "get_cli_context", "set_cli_context"]
