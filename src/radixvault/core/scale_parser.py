"""Lexical extraction of color token tables.

Token sources declare scales as flat object literals::

    export const blue = {
      blue1: "#fbfdff",
      blue2: '#f4faff',
    };

This module pulls those declarations out with regular expressions. It does
not evaluate or fully parse the source: declarations it cannot read as a
flat list of string entries come back with no tokens, and the parser never
raises on malformed input.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from radixvault.core.models import TokenBlock
from radixvault.shared.constants import ColorScaleConfig

logger = logging.getLogger(__name__)

# Declaration with a flat body. The body stops at the first closing brace.
_BLOCK_PATTERN = re.compile(
    r"export\s+const\s+([A-Za-z][A-Za-z0-9]*)\s*=\s*\{([^}]*)\}",
    re.DOTALL,
)
_ENTRY_PATTERN = re.compile(r"(\w+):\s*([\"'])(.*?)\2,?")
_DECLARATION_PATTERN = re.compile(r"export\s+const\s+([a-zA-Z][a-zA-Z0-9]*)\s*=")

# Bodies containing any of these are nested objects, computed keys or
# template interpolation.
_UNSUPPORTED_BODY_MARKERS = ("{", "[", "`")


class ScaleNameKind(str, Enum):
    """Classification of a declared scale name."""

    BASE = "base"
    VARIANT = "variant"


def _parse_entries(body: str) -> dict[str, str]:
    if any(marker in body for marker in _UNSUPPORTED_BODY_MARKERS):
        return {}
    return {key: value for key, _quote, value in _ENTRY_PATTERN.findall(body)}


def extract_blocks(source_text: str) -> list[TokenBlock]:
    """Extract every flat ``export const`` object declaration.

    Args:
        source_text: Raw token source

    Returns:
        One TokenBlock per declaration, in source order. Blocks the parser
        cannot read have an empty token mapping.
    """
    blocks = [
        TokenBlock(declared_name=name, tokens=_parse_entries(body))
        for name, body in _BLOCK_PATTERN.findall(source_text)
    ]
    logger.debug(
        "Extracted %d token blocks (%d non-empty)",
        len(blocks),
        sum(1 for block in blocks if not block.is_empty),
    )
    return blocks


def is_overlay_scale(name: str) -> bool:
    """Return True for the overlay scales kept in their own files."""
    return name in ColorScaleConfig.OVERLAY_SCALES


def canonical_scale_name(name: str) -> str:
    """Spelling a requested scale name is resolved and cached under.

    Overlay scales keep their declared camel case, every other name is
    lower-cased.

    >>> canonical_scale_name("BLACKA")
    'blackA'
    >>> canonical_scale_name("Blue")
    'blue'
    """
    folded = name.lower()
    for overlay in ColorScaleConfig.OVERLAY_SCALES:
        if overlay.lower() == folded:
            return overlay
    return folded


def classify_scale_name(name: str) -> ScaleNameKind:
    """Classify a declared name as a base scale or a derived variant.

    Overlay scales end in ``A`` yet are base scales.
    """
    if is_overlay_scale(name):
        return ScaleNameKind.BASE
    if name.endswith(ColorScaleConfig.ALPHA_SUFFIX) or ColorScaleConfig.P3_MARKER in name:
        return ScaleNameKind.VARIANT
    return ScaleNameKind.BASE


def variant_names(base: str) -> list[str]:
    """Names of every variant of a base scale, base first.

    >>> variant_names("blue")
    ['blue', 'blueA', 'blueP3', 'blueP3A']
    """
    return [f"{base}{suffix}" for suffix in ColorScaleConfig.VARIANT_SUFFIXES]


def extract_base_scale_names(source_text: str) -> list[str]:
    """Sorted unique base scale names declared in a token source."""
    names = {
        name
        for name in _DECLARATION_PATTERN.findall(source_text)
        if classify_scale_name(name) is ScaleNameKind.BASE
    }
    return sorted(names)


__all__ = [
    "ScaleNameKind",
    "canonical_scale_name",
    "classify_scale_name",
    "extract_base_scale_names",
    "extract_blocks",
    "is_overlay_scale",
    "variant_names",
]
