"""Resolver context.

A ResolverContext owns one cache, one throttle and one fetcher. It is
built once at startup and handed to every component that talks to the
network, so tests can run against a fresh, isolated context each time.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Any

from typing_extensions import Self

from radixvault.config.models.settings import Settings
from radixvault.services.http_fetcher import HostKind, RetryingFetcher
from radixvault.services.request_throttle import RequestThrottle
from radixvault.services.ttl_cache import Clock, TTLCache


@dataclass
class ResolverContext:
    """Shared state of one resolver.

    Attributes:
        settings: Application settings
        fetcher: HTTP fetcher (anything with fetch_text/fetch_json)
        throttle: Gate every network call is admitted through
        cache: Resolution cache
    """

    settings: Settings
    fetcher: RetryingFetcher
    throttle: RequestThrottle = field(default_factory=RequestThrottle)
    cache: TTLCache = field(default_factory=TTLCache)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        fetcher: Any | None = None,
        clock: Clock | None = None,
    ) -> ResolverContext:
        """Build a context from settings.

        Args:
            settings: Application settings (defaults are used when None)
            fetcher: Replacement fetcher, e.g. a fake in tests
            clock: Replacement cache clock
        """
        settings = settings or Settings()
        cache_kwargs: dict[str, Any] = {
            "ttl": settings.cache.ttl,
            "coalesce": settings.cache.coalesce,
            "enabled": settings.cache.enabled,
        }
        if clock is not None:
            cache_kwargs["clock"] = clock
        return cls(
            settings=settings,
            fetcher=fetcher or RetryingFetcher(settings.github),
            throttle=RequestThrottle(),
            cache=TTLCache(**cache_kwargs),
        )

    def raw_url(self, repo: str, path: str) -> str:
        """URL of a file on the raw host."""
        github = self.settings.github
        return f"{github.raw_base_url}/{github.owner}/{repo}/{github.branch}/{path}"

    def contents_url(self, repo: str, path: str) -> str:
        """URL of a directory listing on the metadata API."""
        github = self.settings.github
        return f"{github.api_base_url}/repos/{github.owner}/{repo}/contents/{path}"

    async def fetch_text(self, url: str) -> str:
        """Fetch raw text through the throttle."""
        return await self.throttle.admit(
            lambda: self.fetcher.fetch_text(url, host=HostKind.RAW),
        )

    async def fetch_json(self, url: str) -> Any:
        """Fetch metadata JSON through the throttle."""
        return await self.throttle.admit(
            lambda: self.fetcher.fetch_json(url, host=HostKind.METADATA),
        )

    async def close(self) -> None:
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        await self.close()


__all__ = ["ResolverContext"]
