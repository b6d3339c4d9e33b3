"""
RadixVault Package Main Entry Point

This module serves as the main entry point when the package is run as a module
using `python -m radixvault`. It delegates to the Typer application.
"""

import logging
import sys

from radixvault.cli.error_handler import handle_cli_error
from radixvault.cli.typer_app import app

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the CLI, turning Ctrl+C into a clean exit."""
    try:
        app()
    except KeyboardInterrupt as e:
        logger.info("Command interrupted by user")
        sys.exit(handle_cli_error(e, "main"))


if __name__ == "__main__":
    main()
