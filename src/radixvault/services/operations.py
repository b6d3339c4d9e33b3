"""Result-shaping operations.

Thin async functions turning Resolver output into the pydantic result
models handed to callers.
"""

from __future__ import annotations

import asyncio
import json
import logging

from radixvault.core.models import ResourceDomain
from radixvault.services.library_config import get_library_config
from radixvault.services.resolver import Resolver
from radixvault.shared.constants import CLIDefaults, Library
from radixvault.shared.models import (
    ComponentInfo,
    GetComponentResult,
    GettingStartedResult,
    ListComponentsResult,
    validate_name,
)

logger = logging.getLogger(__name__)


async def list_components(resolver: Resolver, library: Library | str) -> ListComponentsResult:
    """List a library, colors included (token files become entries)."""
    config = get_library_config(library)
    logger.info("Fetching %s components...", config.library.value)

    names = await resolver.list(config.library)
    return ListComponentsResult(
        library=config.library,
        total=len(names),
        components=[
            ComponentInfo(
                name=name,
                package_name=config.package_name(name),
                type=config.component_type,
            )
            for name in names
        ],
        note=config.listing_note,
    )


async def get_component(
    resolver: Resolver,
    library: Library | str,
    name: str,
) -> GetComponentResult:
    """Fetch usage and source of a component concurrently.

    For colors the source is the scale's token tables as JSON and the
    usage is the colors documentation bundle.
    """
    config = get_library_config(library)
    name = validate_name(name)
    logger.info("Fetching %s component: %s", config.library.value, name)

    if config.library is Library.COLORS:
        record, documentation = await asyncio.gather(
            resolver.get_scale(name),
            resolver.get_colors_documentation(),
        )
        source = json.dumps(record.to_dict(), indent=CLIDefaults.JSON_INDENT)
        usage = json.dumps(documentation, indent=CLIDefaults.JSON_INDENT, ensure_ascii=False)
    else:
        usage, source = await asyncio.gather(
            resolver.get_text(ResourceDomain.COMPONENT_USAGE, config.library, name),
            resolver.get_text(ResourceDomain.COMPONENT_SOURCE, config.library, name),
        )

    return GetComponentResult(
        library=config.library,
        component_name=name,
        package_name=config.package_name(name),
        type=config.component_type,
        source=source,
        usage=usage,
    )


async def get_getting_started(resolver: Resolver, library: Library | str) -> GettingStartedResult:
    """Fetch the official getting-started guide of a library."""
    config = get_library_config(library)
    logger.info("Fetching official %s getting started guide...", config.library.value)

    content = await resolver.get_getting_started(config.library)
    return GettingStartedResult(
        library=config.library,
        title=config.getting_started_title,
        description=config.getting_started_description,
        source=config.getting_started_source,
        content=content,
        note=config.getting_started_note,
    )


__all__ = ["get_component", "get_getting_started", "list_components"]
