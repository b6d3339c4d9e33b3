"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration and help text.
"""

from typing import Literal


class CLIDefaults:
    """CLI default values."""

    VERSION = "0.1.0"
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    JSON_INDENT = 2


class CLICommands:
    """CLI command names."""

    LIST = "list"
    COMPONENT = "component"
    SCALE = "scale"
    SCALES = "scales"
    GETTING_STARTED = "getting-started"
    INSTALL = "install"


class CLIOptions:
    """CLI option flags."""

    GITHUB_TOKEN = "--github-token"
    GITHUB_TOKEN_SHORT = "-g"
    LOG_LEVEL = "--log-level"
    JSON = "--json"
    VERSION = "--version"
    SOURCE_ONLY = "--source-only"
    USAGE_ONLY = "--usage-only"
    COMPONENT = "--component"
    COMPONENT_SHORT = "-c"
    PACKAGE_MANAGER = "--package-manager"
    PACKAGE_MANAGER_SHORT = "-p"


class CLIHelp:
    """CLI help messages."""

    APP_NAME = "radixvault"
    APP_DESCRIPTION = (
        "Resolve Radix UI component sources, usage docs and color tokens "
        "from GitHub with caching."
    )
    APP_STYLE: Literal["rich"] = "rich"
    VERSION_TEXT = "radixvault v{version}"

    GITHUB_TOKEN_HELP = "GitHub personal access token for higher API rate limits"
    LOG_LEVEL_HELP = "Logging level (DEBUG, INFO, WARNING, ERROR)"
    JSON_HELP = "Output results as JSON"
    LIBRARY_HELP = "Radix library: themes, primitives or colors"
    COMPONENT_NAME_HELP = "Component name, e.g. dialog"
    SCALE_NAME_HELP = "Color scale name, e.g. blue or blackA"
    INSTALL_COMPONENT_HELP = "Optional component for primitive installation"
    PACKAGE_MANAGER_HELP = "Package manager: npm, yarn or pnpm"
    LIST_LIBRARY_HELP = "Radix library: themes, primitives, colors or all"
    SOURCE_ONLY_HELP = "Print only the component source"
    USAGE_ONLY_HELP = "Print only the usage documentation"

    LIST_HELP = "List the components (or color token files) of a library"
    COMPONENT_HELP = "Show usage documentation and source of a component"
    SCALE_HELP = "Show the light, dark or overlay token tables of a color scale"
    SCALES_HELP = "List every base color scale name"
    GETTING_STARTED_HELP = "Show the official getting started guide"
    INSTALL_HELP = "Show installation instructions"


class CLIMessages:
    """CLI message templates."""

    ERROR = "[red]{code}: {message}[/red]"
    UNEXPECTED_ERROR = "[red]Unexpected error: {error}[/red]"
    LIST_TITLE = "Radix {library} ({total})"
    SCALES_TITLE = "Radix color scales ({total})"


__all__ = ["CLICommands", "CLIDefaults", "CLIHelp", "CLIMessages", "CLIOptions"]
