"""Per-library resolution settings.

Each Radix library keeps its components in a different repository and
layout. A LibraryConfig records where to list them, which paths to probe
for source, where the usage docs live and how results are labelled.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable

from radixvault.shared.constants import (
    ColorScaleConfig,
    ComponentType,
    GitHubConfig,
    Library,
    Package,
    RepositoryPaths,
)
from radixvault.shared.errors import DomainError, ErrorCode, ErrorContext

DEFAULT_LISTING_NOTE = (
    "Use get-component tool with a specific component name to get detailed usage information"
)
COLORS_LISTING_NOTE = (
    "Use get-scale tool with a specific scale name to get detailed color values "
    "and usage information"
)
GETTING_STARTED_NOTE = (
    "This content is fetched directly from the official Radix UI documentation "
    "to ensure it stays up-to-date."
)


def _colors_entry(item: dict[str, Any]) -> bool:
    name = str(item.get("name", ""))
    return (
        item.get("type") == "file"
        and name.endswith(".ts")
        and ColorScaleConfig.INDEX_MARKER not in name
    )


def _primitives_entry(item: dict[str, Any]) -> bool:
    name = str(item.get("name", ""))
    return item.get("type") == "dir" and not name.startswith(".")


def _themes_entry(item: dict[str, Any]) -> bool:
    name = str(item.get("name", ""))
    return (
        item.get("type") == "file"
        and not name.startswith(".")
        and not name.endswith("props.tsx")
        and not name.endswith(".css")
    )


@dataclass(frozen=True)
class LibraryConfig:
    """How one library is resolved.

    Attributes:
        library: Library this config describes
        component_type: Kind of resource the library exposes
        repo: Repository holding the sources
        listing_path: Directory enumerated by list()
        listing_filter: Predicate keeping relevant listing entries
        source_candidates: Probe suffixes for component source; ``{name}``
            is replaced by the lower-cased component name
        getting_started_doc: Getting-started page under the website docs
        listing_note: Hint attached to listings
    """

    library: Library
    component_type: ComponentType
    repo: str
    listing_path: str
    listing_filter: Callable[[dict[str, Any]], bool]
    source_candidates: tuple[str, ...] = ()
    getting_started_doc: str = RepositoryPaths.GETTING_STARTED
    listing_note: str = DEFAULT_LISTING_NOTE

    @property
    def display_name(self) -> str:
        return self.library.value.capitalize()

    @property
    def docs_path(self) -> str:
        return RepositoryPaths.WEBSITE_DOCS.format(library=self.library.value)

    def package_name(self, component_name: str) -> str:
        if self.library is Library.PRIMITIVES:
            return f"{Package.PRIMITIVES_PREFIX}{component_name.lower()}"
        if self.library is Library.COLORS:
            return Package.COLORS
        return Package.THEMES

    def source_base_path(self, component_name: str) -> str:
        return f"{self.listing_path}/{component_name.lower()}"

    def source_suffixes(self, component_name: str) -> list[str]:
        return [suffix.format(name=component_name.lower()) for suffix in self.source_candidates]

    def usage_doc_path(self, component_name: str) -> str:
        components_dir = RepositoryPaths.COMPONENT_DOCS.format(library=self.library.value)
        return f"{components_dir}/{component_name.lower()}.mdx"

    def getting_started_path(self) -> str:
        return f"{self.docs_path}/{self.getting_started_doc}"

    @property
    def getting_started_title(self) -> str:
        return f"Radix {self.display_name} - Getting Started"

    @property
    def getting_started_description(self) -> str:
        return f"Official getting started guide for Radix {self.display_name}"

    @property
    def getting_started_source(self) -> str:
        return RepositoryPaths.BLOB_URL.format(
            owner=GitHubConfig.OWNER,
            repo=GitHubConfig.WEBSITE_REPO,
            branch=GitHubConfig.BRANCH,
            path=self.getting_started_path(),
        )

    @property
    def getting_started_note(self) -> str:
        return GETTING_STARTED_NOTE


LIBRARY_CONFIGS = MappingProxyType(
    {
        Library.THEMES: LibraryConfig(
            library=Library.THEMES,
            component_type=ComponentType.STYLED,
            repo=GitHubConfig.THEMES_REPO,
            listing_path=RepositoryPaths.THEMES_COMPONENTS,
            listing_filter=_themes_entry,
            source_candidates=(".tsx", ".ts", "/index.tsx", "/index.ts"),
        ),
        Library.PRIMITIVES: LibraryConfig(
            library=Library.PRIMITIVES,
            component_type=ComponentType.UNSTYLED,
            repo=GitHubConfig.PRIMITIVES_REPO,
            listing_path=RepositoryPaths.PRIMITIVES_COMPONENTS,
            listing_filter=_primitives_entry,
            source_candidates=("/src/{name}.tsx", "/index.tsx", "/src/index.ts", "/index.ts"),
        ),
        Library.COLORS: LibraryConfig(
            library=Library.COLORS,
            component_type=ComponentType.COLOR_SCALE,
            repo=GitHubConfig.COLORS_REPO,
            listing_path=RepositoryPaths.COLORS_TOKENS,
            listing_filter=_colors_entry,
            getting_started_doc=RepositoryPaths.COLORS_GETTING_STARTED,
            listing_note=COLORS_LISTING_NOTE,
        ),
    }
)


def get_library_config(library: Library | str) -> LibraryConfig:
    """Look up the config of a library.

    Raises:
        DomainError: If the library is unknown (``all`` included)
    """
    try:
        return LIBRARY_CONFIGS[Library(library)]
    except ValueError as e:
        raise DomainError(
            ErrorCode.UNSUPPORTED_LIBRARY,
            f"Unsupported library: {library}. Expected one of "
            f"{', '.join(lib.value for lib in Library)}",
            ErrorContext(operation="get_library_config", identifier=str(library)),
            original_error=e,
        ) from e


__all__ = ["LIBRARY_CONFIGS", "LibraryConfig", "get_library_config"]
