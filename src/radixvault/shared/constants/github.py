"""
GitHub Repository Constants

This module contains the coordinates of the Radix UI repositories and the
paths inside them that RadixVault resolves resources against.
"""

from typing import ClassVar


class GitHubConfig:
    """GitHub host and repository constants."""

    OWNER = "radix-ui"
    BRANCH = "main"

    THEMES_REPO = "themes"
    PRIMITIVES_REPO = "primitives"
    COLORS_REPO = "colors"
    WEBSITE_REPO = "website"

    API_BASE_URL = "https://api.github.com"
    RAW_BASE_URL = "https://raw.githubusercontent.com"

    # Headers
    ACCEPT_HEADER = "application/vnd.github+json"
    USER_AGENT = "Mozilla/5.0 (compatible; RadixVault/0.1.0)"

    # Environment variable carrying the bearer token
    TOKEN_ENV_VAR = "GITHUB_PERSONAL_ACCESS_TOKEN"  # noqa: S105  # nosec B105


class RepositoryPaths:
    """Paths inside each repository."""

    THEMES_COMPONENTS = "packages/radix-ui-themes/src/components"
    PRIMITIVES_COMPONENTS = "packages/react"
    COLORS_TOKENS = "src"

    # Documentation lives in the website repository under data/<library>/docs
    WEBSITE_DOCS = "data/{library}/docs"
    COMPONENT_DOCS = "data/{library}/docs/components"
    GETTING_STARTED = "overview/getting-started.mdx"
    COLORS_GETTING_STARTED = "overview/installation.mdx"

    COLORS_DOCUMENTATION_FILES: ClassVar[tuple[str, ...]] = (
        "overview/usage.mdx",
        "overview/custom-palettes.mdx",
        "overview/aliasing.mdx",
        "palette-composition/scales.mdx",
        "palette-composition/understanding-the-scale.mdx",
        "palette-composition/composing-a-palette.mdx",
    )

    BLOB_URL = "https://github.com/{owner}/{repo}/blob/{branch}/{path}"


__all__ = ["GitHubConfig", "RepositoryPaths"]
