"""Data models for resource resolution.

This module defines the value objects passed between the parser, the
assembler, the cache and the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from radixvault.shared.constants import CacheConfig


class ResourceDomain(str, Enum):
    """Kind of resource a resolution produces."""

    COMPONENT_SOURCE = "component_source"
    COMPONENT_USAGE = "component_usage"
    SCALE_TOKENS = "scale_tokens"
    LISTING = "listing"
    GETTING_STARTED = "getting_started"
    DOCUMENTATION = "documentation"


@dataclass(frozen=True)
class ResolutionKey:
    """Cache key of one resolution.

    The identifier is lower-cased so ``Button`` and ``button`` share an
    entry. Per-library domains carry the library in ``sub_identifier``.

    Attributes:
        domain: Kind of resource
        identifier: Component name, scale name or library name
        sub_identifier: Library for per-library domains
    """

    domain: ResourceDomain
    identifier: str
    sub_identifier: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "identifier", self.identifier.lower())

    def __str__(self) -> str:
        parts = [self.domain.value, self.identifier]
        if self.sub_identifier is not None:
            parts.append(self.sub_identifier)
        return CacheConfig.KEY_SEPARATOR.join(parts)


@dataclass(frozen=True)
class TokenBlock:
    """One ``export const <name> = { ... }`` declaration.

    Attributes:
        declared_name: Name of the exported constant
        tokens: Token name to value, in source order
    """

    declared_name: str
    tokens: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.tokens


# variant name -> token name -> value
VariantTable = dict[str, dict[str, str]]


@dataclass
class ColorScaleRecord:
    """Token tables of one color scale.

    Either ``light``/``dark`` or ``overlay`` is populated, never both.

    Attributes:
        scale_name: Requested scale name
        light: Variants found in the light token file
        dark: Variants found in the dark token file
        overlay: Variants found in the dedicated overlay file
    """

    scale_name: str
    light: VariantTable | None = None
    dark: VariantTable | None = None
    overlay: VariantTable | None = None

    def __post_init__(self) -> None:
        if self.overlay is not None and (self.light is not None or self.dark is not None):
            msg = f"Scale {self.scale_name!r} cannot carry both overlay and light/dark tables"
            raise ValueError(msg)

    @property
    def is_empty(self) -> bool:
        return self.light is None and self.dark is None and self.overlay is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record, omitting absent sides."""
        data: dict[str, Any] = {"scaleName": self.scale_name}
        for side in ("light", "dark", "overlay"):
            table = getattr(self, side)
            if table is not None:
                data[side] = table
        return data


__all__ = [
    "ColorScaleRecord",
    "ResolutionKey",
    "ResourceDomain",
    "TokenBlock",
    "VariantTable",
]
