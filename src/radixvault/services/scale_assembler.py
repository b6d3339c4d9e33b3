"""Assembly of color scale records from the token sources.

Regular scales are spread over ``light.ts`` and ``dark.ts``, each holding
the base table and its alpha and wide-gamut variants. The overlay scales
``blackA`` and ``whiteA`` live in a file of their own.
"""

from __future__ import annotations

import asyncio
import logging

from radixvault.core.models import ColorScaleRecord, TokenBlock, VariantTable
from radixvault.core.scale_parser import extract_blocks, is_overlay_scale, variant_names
from radixvault.services.context import ResolverContext
from radixvault.shared.constants import ColorScaleConfig, GitHubConfig, RepositoryPaths
from radixvault.shared.errors import RadixVaultNetworkError, create_not_found_error
from radixvault.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


def collect_variants(blocks: list[TokenBlock], names: list[str]) -> VariantTable:
    """Token tables of the wanted names, in ``names`` order.

    Blocks without entries are skipped and the first declaration of a
    name wins.
    """
    by_name: dict[str, TokenBlock] = {}
    for block in blocks:
        if block.declared_name in names and not block.is_empty:
            by_name.setdefault(block.declared_name, block)
    return {name: dict(by_name[name].tokens) for name in names if name in by_name}


class ScaleAssembler:
    """Build a ColorScaleRecord for one scale name.

    Args:
        context: Resolver context providing throttled fetches
    """

    def __init__(self, context: ResolverContext) -> None:
        self.context = context

    def token_file_url(self, file_name: str) -> str:
        path = f"{RepositoryPaths.COLORS_TOKENS}/{file_name}{ColorScaleConfig.SOURCE_EXTENSION}"
        return self.context.raw_url(GitHubConfig.COLORS_REPO, path)

    async def fetch_token_file(self, file_name: str) -> str:
        """Fetch one token source, e.g. ``light`` or ``blackA``."""
        return await self.context.fetch_text(self.token_file_url(file_name))

    async def _fetch_optional(self, file_name: str, scale_name: str) -> str | None:
        try:
            return await self.fetch_token_file(file_name)
        except RadixVaultNetworkError as e:
            log_operation_error(
                logger=logger,
                error=e,
                operation="assemble_scale",
                additional_context={"scale": scale_name, "file": file_name},
                level=logging.WARNING,
            )
            return None

    async def assemble(self, scale_name: str) -> ColorScaleRecord:
        """Fetch and merge every table of ``scale_name``.

        ``scale_name`` must already be canonical (see canonical_scale_name).

        Raises:
            NotFoundError: If no matching table with entries was found
        """
        if is_overlay_scale(scale_name):
            record = await self._assemble_overlay(scale_name)
        else:
            record = await self._assemble_themed(scale_name)

        if record.is_empty:
            error = create_not_found_error(
                scale_name,
                message=f'Color scale "{scale_name}" not found',
                operation="assemble_scale",
            )
            log_operation_error(logger=logger, error=error, level=logging.WARNING)
            raise error

        return record

    async def _assemble_overlay(self, scale_name: str) -> ColorScaleRecord:
        try:
            source = await self.fetch_token_file(scale_name)
        except RadixVaultNetworkError as e:
            raise create_not_found_error(
                scale_name,
                message=f'Color scale "{scale_name}" not found in repository',
                operation="assemble_scale",
                original_error=e,
            ) from e

        overlay = collect_variants(extract_blocks(source), [scale_name])
        return ColorScaleRecord(scale_name=scale_name, overlay=overlay or None)

    async def _assemble_themed(self, scale_name: str) -> ColorScaleRecord:
        light_source, dark_source = await asyncio.gather(
            self._fetch_optional(ColorScaleConfig.LIGHT_FILE, scale_name),
            self._fetch_optional(ColorScaleConfig.DARK_FILE, scale_name),
        )
        names = variant_names(scale_name)

        light = collect_variants(extract_blocks(light_source), names) if light_source else {}
        dark = collect_variants(extract_blocks(dark_source), names) if dark_source else {}

        return ColorScaleRecord(
            scale_name=scale_name,
            light=light or None,
            dark=dark or None,
        )


__all__ = ["ScaleAssembler", "collect_variants"]
