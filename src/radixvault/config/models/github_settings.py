"""GitHub access configuration model.

This module contains the configuration for the two remote hosts RadixVault
reads from: the repository-metadata API and the raw file host.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from radixvault.shared.constants import GitHubConfig, NetworkConfig


class GitHubSettings(BaseModel):
    """GitHub API and raw host configuration.

    Security: token is masked in __repr__ so it never reaches logs.
    """

    token: str = Field(
        default="",
        repr=False,
        description="Bearer token for the metadata API (optional)",
    )

    api_base_url: str = Field(
        default=GitHubConfig.API_BASE_URL,
        description="Repository metadata API base URL",
    )
    raw_base_url: str = Field(
        default=GitHubConfig.RAW_BASE_URL,
        description="Raw file host base URL",
    )
    owner: str = Field(default=GitHubConfig.OWNER, description="Repository owner")
    branch: str = Field(default=GitHubConfig.BRANCH, description="Branch to resolve against")
    user_agent: str = Field(default=GitHubConfig.USER_AGENT, description="User-Agent header")

    timeout: float = Field(
        default=NetworkConfig.DEFAULT_TIMEOUT,
        gt=0,
        description="Per-request timeout in seconds",
    )
    retry_attempts: int = Field(
        default=NetworkConfig.DEFAULT_RETRIES,
        ge=0,
        description="Additional attempts for transient statuses",
    )
    retry_delay: float = Field(
        default=NetworkConfig.RETRY_DELAY,
        ge=0,
        description="Base delay between retries in seconds (doubles per attempt)",
    )

    def __repr__(self) -> str:
        masked_token = "****" if self.token else "[empty]"
        return (
            f"GitHubSettings("
            f"token={masked_token}, "
            f"owner={self.owner}, "
            f"branch={self.branch}, "
            f"timeout={self.timeout}, "
            f"retry_attempts={self.retry_attempts})"
        )


__all__ = ["GitHubSettings"]
