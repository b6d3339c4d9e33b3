"""Cache configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from radixvault.shared.constants import CacheConfig


class CacheSettings(BaseModel):
    """Resolution cache configuration."""

    enabled: bool = Field(default=True, description="Enable caching")
    ttl: int = Field(
        default=CacheConfig.TTL,
        gt=0,
        description="Cache time-to-live in seconds",
    )
    coalesce: bool = Field(
        default=False,
        description="Share one in-flight computation between concurrent misses",
    )


__all__ = ["CacheSettings"]
