"""
Library and Color Scale Constants

Enumerations for the three Radix libraries and the naming conventions
used by the color token sources.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class Library(str, Enum):
    """Radix libraries RadixVault can resolve against."""

    THEMES = "themes"
    PRIMITIVES = "primitives"
    COLORS = "colors"


class LibrarySelection(str, Enum):
    """Library selection accepted by the CLI (adds ``all``)."""

    THEMES = "themes"
    PRIMITIVES = "primitives"
    COLORS = "colors"
    ALL = "all"


class ComponentType(str, Enum):
    """Kind of resource a library exposes."""

    STYLED = "styled"
    UNSTYLED = "unstyled"
    COLOR_SCALE = "color-scale"


class Package:
    """npm package names."""

    THEMES = "@radix-ui/themes"
    PRIMITIVES_PREFIX = "@radix-ui/react-"
    COLORS = "@radix-ui/colors"


class ColorScaleConfig:
    """Color token source conventions."""

    # Scales that end in "A" but are base scales living in their own file
    OVERLAY_SCALES: ClassVar[frozenset[str]] = frozenset({"blackA", "whiteA"})

    # Variant suffixes in lookup order: base, alpha, wide-gamut, wide-gamut alpha
    VARIANT_SUFFIXES: ClassVar[tuple[str, ...]] = ("", "A", "P3", "P3A")
    ALPHA_SUFFIX = "A"
    P3_MARKER = "P3"

    LIGHT_FILE = "light"
    DARK_FILE = "dark"
    SOURCE_EXTENSION = ".ts"
    INDEX_MARKER = "index"


class PackageManager(str, Enum):
    """Package managers supported by the installation guides."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


__all__ = [
    "ColorScaleConfig",
    "ComponentType",
    "Library",
    "LibrarySelection",
    "Package",
    "PackageManager",
]
