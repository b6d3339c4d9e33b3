"""
CLI Error Handling Utilities

Consistent error output and exit codes for every command.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from radixvault.shared.constants import CLIDefaults
from radixvault.shared.errors import (
    CliError,
    ErrorCode,
    ErrorContext,
    RadixVaultError,
)

logger = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


def format_json_output(
    command: str,
    *,
    success: bool,
    errors: list[dict[str, Any]] | None = None,
    data: Any | None = None,
) -> str:
    """Format a command result or failure as JSON.

    Args:
        command: The command that was executed
        success: Whether the operation was successful
        errors: Serialized errors
        data: Command result

    Returns:
        JSON document
    """
    output: dict[str, Any] = {"success": success, "command": command}
    if errors:
        output["errors"] = errors
    if data is not None:
        output["data"] = data
    return json.dumps(output, indent=CLIDefaults.JSON_INDENT, ensure_ascii=False)


def _map_error_to_cli_error(error: BaseException, command: str) -> CliError:
    """Map any exception to a CliError."""
    if isinstance(error, CliError):
        return error

    if isinstance(error, RadixVaultError):
        return CliError(
            error.code,
            error.message,
            error.context,
            original_error=error,
            command=command,
        )

    if isinstance(error, ValidationError):
        details = "; ".join(err["msg"] for err in error.errors())
        return CliError(
            ErrorCode.VALIDATION_ERROR,
            f"Invalid input: {details}",
            ErrorContext(operation=command),
            original_error=error,
            command=command,
        )

    if isinstance(error, KeyboardInterrupt):
        return CliError(
            ErrorCode.CLI_UNEXPECTED_ERROR,
            "Command interrupted by user",
            ErrorContext(operation=command),
            command=command,
            exit_code=INTERRUPTED_EXIT_CODE,
        )

    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        f"Unexpected error: {error}",
        ErrorContext(operation=command),
        original_error=error,
        command=command,
    )


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Log and print an error, returning the exit code.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    cli_error = _map_error_to_cli_error(error, command)
    context = {"command": command, "error_type": type(error).__name__}

    if isinstance(error, (RadixVaultError, KeyboardInterrupt)):
        logger.debug("CLI error in %s: %s", command, cli_error.message, extra={"context": context})
    else:
        logger.error(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            exc_info=error,
            extra={"context": context},
        )

    if json_output:
        sys.stdout.write(
            format_json_output(command, success=False, errors=[cli_error.to_dict()]) + "\n",
        )
    else:
        sys.stderr.write(f"Error: {cli_error.code.value}: {cli_error.message}\n")

    return cli_error.exit_code


__all__ = ["format_json_output", "handle_cli_error"]
