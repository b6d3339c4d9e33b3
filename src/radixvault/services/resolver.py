"""Resource resolver.

The Resolver answers "give me the listing, source, usage docs or token
data for X" by checking the cache and, on a miss, running the matching
fetch strategy. Only listings degrade to the static fallback catalog;
content lookups either succeed or raise.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from functools import partial
from typing import Any

from radixvault.core.models import ColorScaleRecord, ResolutionKey, ResourceDomain
from radixvault.core.scale_parser import canonical_scale_name, extract_base_scale_names
from radixvault.services.context import ResolverContext
from radixvault.services.fallback_catalog import fallback_list
from radixvault.services.library_config import LibraryConfig, get_library_config
from radixvault.services.path_probe import PathProbe
from radixvault.services.scale_assembler import ScaleAssembler
from radixvault.shared.constants import GitHubConfig, Library, RepositoryPaths
from radixvault.shared.errors import (
    LISTING_FALLBACK_ERRORS,
    ApplicationError,
    ErrorCode,
    ErrorContext,
    MalformedResponseError,
    RadixVaultNetworkError,
)
from radixvault.shared.logging import (
    log_operation_error,
    log_operation_start,
    log_operation_success,
)

logger = logging.getLogger(__name__)

_SOURCE_EXTENSION_PATTERN = re.compile(r"\.(ts|tsx)$")

TEXT_DOMAINS = frozenset({ResourceDomain.COMPONENT_SOURCE, ResourceDomain.COMPONENT_USAGE})


def filter_listing(config: LibraryConfig, entries: Any) -> list[str]:
    """Apply the library's listing filter and strip source extensions.

    Raises:
        MalformedResponseError: If ``entries`` is not a JSON array
    """
    if not isinstance(entries, list):
        raise MalformedResponseError(
            f"Invalid response from GitHub API for {config.library.value} listing",
            context=ErrorContext(operation="list", identifier=config.library.value),
        )
    return [
        _SOURCE_EXTENSION_PATTERN.sub("", str(entry["name"]))
        for entry in entries
        if isinstance(entry, dict) and config.listing_filter(entry)
    ]


def colors_documentation_key(file_name: str) -> str:
    """``overview/usage.mdx`` -> ``overview_usage``."""
    return file_name.replace(".mdx", "", 1).replace("/", "_", 1)


class Resolver:
    """Cached resolution of Radix resources.

    Args:
        context: Shared resolver context
    """

    def __init__(self, context: ResolverContext) -> None:
        self.context = context
        self.probe = PathProbe(context)
        self.assembler = ScaleAssembler(context)

    def set_github_token(self, token: str | None) -> None:
        """Set or clear (empty or blank token) the metadata API token."""
        self.context.fetcher.set_token(token)

    async def list(self, library: Library | str) -> list[str]:
        """Enumerate the identifiers of a library.

        Falls back to the static catalog, with a warning, when the listing
        is rate limited, unauthorized, unreachable, timed out, missing,
        malformed or empty after filtering. Other failures propagate. Only
        live listings are cached.
        """
        config = get_library_config(library)
        key = ResolutionKey(ResourceDomain.LISTING, config.library.value)
        try:
            return await self.context.cache.get_or_compute(key, lambda: self._fetch_listing(config))
        except LISTING_FALLBACK_ERRORS as e:
            log_operation_error(
                logger=logger,
                error=e,
                operation="list",
                additional_context={"library": config.library.value},
                level=logging.WARNING,
            )
            logger.warning(
                "Using fallback component list for %s due to API issues",
                config.library.value,
            )
            return fallback_list(config.library)

    async def _fetch_listing(self, config: LibraryConfig) -> list[str]:
        start_time = time.perf_counter()
        log_operation_start(logger, "list", {"library": config.library.value})

        url = self.context.contents_url(config.repo, config.listing_path)
        names = filter_listing(config, await self.context.fetch_json(url))
        if not names:
            raise MalformedResponseError(
                f"No components found in {config.library.value} library",
                context=ErrorContext(operation="list", identifier=config.library.value, url=url),
            )

        log_operation_success(
            logger=logger,
            operation="list",
            duration_ms=(time.perf_counter() - start_time) * 1000,
            result_info={"count": len(names)},
            context={"library": config.library.value},
        )
        return names

    async def get_text(
        self,
        domain: ResourceDomain,
        library: Library | str,
        identifier: str,
    ) -> str:
        """Fetch component source or usage docs. Never falls back.

        Raises:
            NotFoundError: If no candidate path resolves
            ApplicationError: If ``domain`` is not a text domain or the
                library has no component sources (colors)
        """
        if domain not in TEXT_DOMAINS:
            raise ApplicationError(
                ErrorCode.VALIDATION_ERROR,
                f"get_text does not serve {domain.value}",
                ErrorContext(operation="get_text", identifier=identifier),
            )

        config = get_library_config(library)
        key = ResolutionKey(domain, identifier, config.library.value)

        fetch = self._fetch_source if domain is ResourceDomain.COMPONENT_SOURCE else self._fetch_usage
        return await self.context.cache.get_or_compute(key, partial(fetch, config, identifier))

    async def _fetch_source(self, config: LibraryConfig, identifier: str) -> str:
        suffixes = config.source_suffixes(identifier)
        if not suffixes:
            raise ApplicationError(
                ErrorCode.VALIDATION_ERROR,
                f"{config.library.value} has no component sources, use get_scale",
                ErrorContext(operation="get_text", identifier=identifier),
            )
        base_path = self.context.raw_url(config.repo, config.source_base_path(identifier))
        return await self.probe.resolve_text(identifier, base_path, suffixes)

    async def _fetch_usage(self, config: LibraryConfig, identifier: str) -> str:
        url = self.context.raw_url(GitHubConfig.WEBSITE_REPO, config.usage_doc_path(identifier))
        return await self.probe.resolve_text(identifier, url, [""])

    async def get_scale(self, identifier: str) -> ColorScaleRecord:
        """Assemble the token tables of a color scale. Never falls back.

        Raises:
            NotFoundError: If the scale has no tables
        """
        scale_name = canonical_scale_name(identifier)
        key = ResolutionKey(ResourceDomain.SCALE_TOKENS, scale_name)
        return await self.context.cache.get_or_compute(
            key,
            lambda: self.assembler.assemble(scale_name),
        )

    async def get_getting_started(self, library: Library | str) -> str:
        """Fetch the getting-started guide of a library."""
        config = get_library_config(library)
        key = ResolutionKey(ResourceDomain.GETTING_STARTED, config.library.value)
        url = self.context.raw_url(GitHubConfig.WEBSITE_REPO, config.getting_started_path())
        return await self.context.cache.get_or_compute(key, lambda: self.context.fetch_text(url))

    async def get_colors_documentation(self) -> dict[str, str]:
        """Fetch the color documentation pages.

        A page that cannot be fetched is recorded as an error string
        instead of failing the whole bundle.
        """
        key = ResolutionKey(ResourceDomain.DOCUMENTATION, Library.COLORS.value)
        return await self.context.cache.get_or_compute(key, self._fetch_colors_documentation)

    async def _fetch_colors_documentation(self) -> dict[str, str]:
        docs_path = RepositoryPaths.WEBSITE_DOCS.format(library=Library.COLORS.value)
        documentation: dict[str, str] = {}

        for file_name in RepositoryPaths.COLORS_DOCUMENTATION_FILES:
            url = self.context.raw_url(GitHubConfig.WEBSITE_REPO, f"{docs_path}/{file_name}")
            key = colors_documentation_key(file_name)
            try:
                documentation[key] = await self.context.fetch_text(url)
            except RadixVaultNetworkError as e:
                log_operation_error(
                    logger=logger,
                    error=e,
                    operation="get_colors_documentation",
                    additional_context={"file": file_name},
                    level=logging.WARNING,
                )
                documentation[key] = f"Error fetching {file_name}: {e}"

        return documentation

    async def list_scale_names(self) -> list[str]:
        """Every base scale name declared across the color token files.

        Falls back to the static color list when the token files cannot be
        listed. Token files that fail to download are skipped.
        """
        key = ResolutionKey(ResourceDomain.LISTING, "scale-names", Library.COLORS.value)
        try:
            return await self.context.cache.get_or_compute(key, self._collect_scale_names)
        except LISTING_FALLBACK_ERRORS as e:
            log_operation_error(
                logger=logger,
                error=e,
                operation="list_scale_names",
                level=logging.WARNING,
            )
            return fallback_list(Library.COLORS)

    async def _collect_scale_names(self) -> list[str]:
        files = await self._fetch_listing(get_library_config(Library.COLORS))
        sources = await asyncio.gather(
            *(self._fetch_token_file_or_empty(name) for name in files),
        )
        names: set[str] = set()
        for source in sources:
            names.update(extract_base_scale_names(source))
        return sorted(names)

    async def _fetch_token_file_or_empty(self, file_name: str) -> str:
        try:
            return await self.assembler.fetch_token_file(file_name)
        except RadixVaultNetworkError as e:
            log_operation_error(
                logger=logger,
                error=e,
                operation="list_scale_names",
                additional_context={"file": file_name},
                level=logging.WARNING,
            )
            return ""


__all__ = ["Resolver", "colors_documentation_key", "filter_listing"]
