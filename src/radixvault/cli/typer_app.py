"""
RadixVault Typer CLI Application

Command-line access to the resolver: listings, component source and
usage docs, color scales, getting-started guides and installation guides.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, Optional, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markdown import Markdown
from rich.syntax import Syntax
from rich.table import Table

from radixvault.cli.context import CliContext, LogLevel, get_cli_context, set_cli_context
from radixvault.cli.error_handler import format_json_output, handle_cli_error
from radixvault.config import get_config
from radixvault.services import operations
from radixvault.services.context import ResolverContext
from radixvault.services.installation import installation_guide
from radixvault.services.resolver import Resolver
from radixvault.shared.constants import (
    CLICommands,
    CLIDefaults,
    CLIHelp,
    CLIMessages,
    CLIOptions,
    GitHubConfig,
    Library,
    LibrarySelection,
    PackageManager,
)
from radixvault.shared.logging import setup_structured_logger
from radixvault.shared.models import validate_name

__version__ = CLIDefaults.VERSION

T = TypeVar("T")

console = Console()

app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


@app.callback()
def main(
    github_token: Optional[str] = typer.Option(
        None,
        CLIOptions.GITHUB_TOKEN,
        CLIOptions.GITHUB_TOKEN_SHORT,
        envvar=GitHubConfig.TOKEN_ENV_VAR,
        help=CLIHelp.GITHUB_TOKEN_HELP,
        show_default=False,
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        CLIOptions.LOG_LEVEL,
        help=CLIHelp.LOG_LEVEL_HELP,
        case_sensitive=False,
    ),
    json_output: bool = typer.Option(False, CLIOptions.JSON, help=CLIHelp.JSON_HELP),
    version: bool = typer.Option(
        False,
        CLIOptions.VERSION,
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Process the global options."""
    set_cli_context(
        CliContext(
            log_level=log_level,
            json_output=json_output,
            github_token=github_token,
        )
    )
    try:
        settings = get_config()
        setup_structured_logger(
            level=log_level.value,
            log_file=settings.logging.file,
            use_rich_console=settings.logging.rich_console,
        )
    except Exception as e:
        raise typer.Exit(handle_cli_error(e, "main-callback", json_output=json_output)) from e


def _build_context() -> ResolverContext:
    context = ResolverContext.from_settings(get_config())
    token = get_cli_context().github_token
    if token:
        context.fetcher.set_token(token)
    return context


def _resolve(operation: Callable[[Resolver], Awaitable[T]]) -> T:
    """Run one async operation against a fresh resolver."""

    async def runner() -> T:
        async with _build_context() as context:
            return await operation(Resolver(context))

    return asyncio.run(runner())


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def _execute(command: str, action: Callable[[], Any], render: Callable[[Any], None]) -> None:
    """Run ``action`` and print its result as JSON or through ``render``."""
    json_output = get_cli_context().json_output
    try:
        result = action()
        if json_output:
            typer.echo(format_json_output(command, success=True, data=_to_jsonable(result)))
        else:
            render(result)
    except Exception as e:
        raise typer.Exit(handle_cli_error(e, command, json_output=json_output)) from e


def _render_listing(result: operations.ListComponentsResult) -> None:
    table = Table(title=CLIMessages.LIST_TITLE.format(library=result.library.value, total=result.total))
    table.add_column("Name", style="cyan")
    table.add_column("Package")
    table.add_column("Type", style="dim")
    for component in result.components:
        table.add_row(component.name, component.package_name, component.type.value)
    console.print(table)
    if result.note:
        console.print(f"[dim]{result.note}[/dim]")


@app.command(CLICommands.LIST, help=CLIHelp.LIST_HELP)
def list_command(
    library: Optional[LibrarySelection] = typer.Argument(
        None,
        envvar="RADIX_LIBRARY",
        help=CLIHelp.LIST_LIBRARY_HELP,
        case_sensitive=False,
    ),
) -> None:
    selection = library or get_config().app.default_library
    libraries = list(Library) if selection is LibrarySelection.ALL else [Library(selection.value)]

    async def list_all(resolver: Resolver) -> list[operations.ListComponentsResult]:
        return [await operations.list_components(resolver, lib) for lib in libraries]

    def render(results: list[operations.ListComponentsResult]) -> None:
        for result in results:
            _render_listing(result)

    _execute(CLICommands.LIST, lambda: _resolve(list_all), render)


@app.command(CLICommands.COMPONENT, help=CLIHelp.COMPONENT_HELP)
def component_command(
    library: Library = typer.Argument(..., help=CLIHelp.LIBRARY_HELP, case_sensitive=False),
    name: str = typer.Argument(..., help=CLIHelp.COMPONENT_NAME_HELP),
    source_only: bool = typer.Option(False, CLIOptions.SOURCE_ONLY, help=CLIHelp.SOURCE_ONLY_HELP),
    usage_only: bool = typer.Option(False, CLIOptions.USAGE_ONLY, help=CLIHelp.USAGE_ONLY_HELP),
) -> None:
    def render(result: operations.GetComponentResult) -> None:
        console.rule(f"{result.component_name} ({result.package_name})")
        if not source_only:
            console.print(Markdown(result.usage))
        if not usage_only:
            lexer = "json" if result.library is Library.COLORS else "tsx"
            console.print(Syntax(result.source, lexer, word_wrap=True))

    _execute(
        CLICommands.COMPONENT,
        lambda: _resolve(lambda resolver: operations.get_component(resolver, library, name)),
        render,
    )


@app.command(CLICommands.SCALE, help=CLIHelp.SCALE_HELP)
def scale_command(
    name: str = typer.Argument(..., help=CLIHelp.SCALE_NAME_HELP),
) -> None:
    async def fetch(resolver: Resolver) -> dict[str, Any]:
        record = await resolver.get_scale(validate_name(name, field="scale"))
        return record.to_dict()

    _execute(
        CLICommands.SCALE,
        lambda: _resolve(fetch),
        lambda data: console.print_json(json.dumps(data)),
    )


@app.command(CLICommands.SCALES, help=CLIHelp.SCALES_HELP)
def scales_command() -> None:
    def render(names: list[str]) -> None:
        console.print(CLIMessages.SCALES_TITLE.format(total=len(names)))
        console.print(", ".join(names))

    _execute(
        CLICommands.SCALES,
        lambda: _resolve(lambda resolver: resolver.list_scale_names()),
        render,
    )


@app.command(CLICommands.GETTING_STARTED, help=CLIHelp.GETTING_STARTED_HELP)
def getting_started_command(
    library: Library = typer.Argument(..., help=CLIHelp.LIBRARY_HELP, case_sensitive=False),
) -> None:
    def render(result: operations.GettingStartedResult) -> None:
        console.rule(result.title)
        console.print(f"[dim]{result.source}[/dim]")
        console.print(Markdown(result.content))

    _execute(
        CLICommands.GETTING_STARTED,
        lambda: _resolve(lambda resolver: operations.get_getting_started(resolver, library)),
        render,
    )


@app.command(CLICommands.INSTALL, help=CLIHelp.INSTALL_HELP)
def install_command(
    library: Library = typer.Argument(..., help=CLIHelp.LIBRARY_HELP, case_sensitive=False),
    component: Optional[str] = typer.Option(
        None,
        CLIOptions.COMPONENT,
        CLIOptions.COMPONENT_SHORT,
        help=CLIHelp.INSTALL_COMPONENT_HELP,
    ),
    package_manager: PackageManager = typer.Option(
        PackageManager.NPM,
        CLIOptions.PACKAGE_MANAGER,
        CLIOptions.PACKAGE_MANAGER_SHORT,
        help=CLIHelp.PACKAGE_MANAGER_HELP,
        case_sensitive=False,
    ),
) -> None:
    def render(guide: Any) -> None:
        console.rule(guide.package_name)
        console.print(Syntax(guide.setup, "tsx", word_wrap=True))

    _execute(
        CLICommands.INSTALL,
        lambda: installation_guide(library, component, package_manager),
        render,
    )


__all__ = ["app"]
