"""Static identifier lists used when a library listing cannot be fetched.

The lists are pinned to the library releases current when they were
written and are only ever served for listings, never for content.
"""

from __future__ import annotations

from types import MappingProxyType

from radixvault.shared.constants import Library

FallbackList = tuple[str, ...]

THEMES_COMPONENTS: FallbackList = (
    "avatar",
    "badge",
    "button",
    "card",
    "checkbox",
    "dialog",
    "dropdown-menu",
    "flex",
    "grid",
    "heading",
    "icon-button",
    "link",
    "popover",
    "progress",
    "radio-group",
    "select",
    "separator",
    "slider",
    "switch",
    "table",
    "tabs",
    "text",
    "text-area",
    "text-field",
    "tooltip",
)

PRIMITIVES_COMPONENTS: FallbackList = (
    "accordion",
    "alert-dialog",
    "aspect-ratio",
    "avatar",
    "checkbox",
    "collapsible",
    "context-menu",
    "dialog",
    "dropdown-menu",
    "form",
    "hover-card",
    "label",
    "menubar",
    "navigation-menu",
    "popover",
    "progress",
    "radio-group",
    "scroll-area",
    "select",
    "separator",
    "slider",
    "switch",
    "tabs",
    "toast",
    "toggle",
    "toggle-group",
    "toolbar",
    "tooltip",
)

COLOR_SCALES: FallbackList = (
    "amber",
    "blue",
    "bronze",
    "brown",
    "crimson",
    "cyan",
    "grass",
    "gray",
    "green",
    "indigo",
    "lime",
    "mauve",
    "mint",
    "orange",
    "pink",
    "plum",
    "purple",
    "red",
    "sage",
    "sky",
    "slate",
    "teal",
    "tomato",
    "violet",
    "yellow",
)

FALLBACK_CATALOG = MappingProxyType(
    {
        Library.THEMES: THEMES_COMPONENTS,
        Library.PRIMITIVES: PRIMITIVES_COMPONENTS,
        Library.COLORS: COLOR_SCALES,
    }
)


def fallback_list(library: Library) -> list[str]:
    """Return a fresh copy of the static list for ``library``."""
    return list(FALLBACK_CATALOG[Library(library)])


__all__ = [
    "COLOR_SCALES",
    "FALLBACK_CATALOG",
    "PRIMITIVES_COMPONENTS",
    "THEMES_COMPONENTS",
    "FallbackList",
    "fallback_list",
]
