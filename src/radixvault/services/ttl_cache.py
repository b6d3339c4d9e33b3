"""In-memory TTL cache for resolution results.

Entries are kept for a fixed window (24 hours by default). An expired
entry is treated as absent and overwritten by the next successful
computation. The table is guarded by a lock so the cache can be shared
with worker threads.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Hashable, TypeVar

from radixvault.shared.constants import CacheConfig
from radixvault.shared.errors import ApplicationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)

V = TypeVar("V")

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """A cached value and the clock time it was stored at.

    Attributes:
        value: Cached result
        fetched_at: Clock reading when the value was stored
        ttl: Lifetime of this entry in seconds
    """

    value: V
    fetched_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        return now - self.fetched_at < self.ttl


class _Missing:
    pass


_MISSING = _Missing()


class TTLCache:
    """Keyed store of (value, fetched_at) pairs with a fixed lifetime.

    Concurrent misses for the same cold key each run their own
    computation unless ``coalesce`` is set, in which case callers share
    one in-flight computation per key.

    Args:
        ttl: Default entry lifetime in seconds (default: 24 hours)
        clock: Time source returning seconds (default: time.monotonic)
        coalesce: Share in-flight computations between concurrent misses
        enabled: When False every lookup computes and nothing is stored
    """

    def __init__(
        self,
        ttl: float = CacheConfig.TTL,
        clock: Clock = time.monotonic,
        *,
        coalesce: bool = False,
        enabled: bool = True,
    ) -> None:
        if ttl <= 0:
            raise ApplicationError(
                code=ErrorCode.CACHE_ERROR,
                message=f"Cache TTL must be positive, got: {ttl}",
                context=ErrorContext(
                    operation="ttl_cache_init",
                    additional_data={"ttl": ttl},
                ),
            )
        self.ttl = ttl
        self.coalesce = coalesce
        self.enabled = enabled
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry[Any]] = {}
        self._in_flight: dict[Hashable, asyncio.Future[Any]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _lookup(self, key: Hashable) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.is_fresh(self._clock()):
                self._hits += 1
                return entry.value
            self._misses += 1
            return _MISSING

    def get(self, key: Hashable) -> Any | None:
        """Return the fresh value for ``key`` or None."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or not entry.is_fresh(self._clock()):
                return None
            return entry.value

    def set(self, key: Hashable, value: Any, ttl: float | None = None) -> None:
        """Store ``value`` stamped with the current clock time."""
        entry = CacheEntry(value=value, fetched_at=self._clock(), ttl=ttl or self.ttl)
        with self._lock:
            self._entries[key] = entry

    async def get_or_compute(
        self,
        key: Hashable,
        compute: Callable[[], Awaitable[V]],
        ttl: float | None = None,
    ) -> V:
        """Return the cached value or compute, store and return a new one.

        A hit within the window never calls ``compute``. Exceptions from
        ``compute`` propagate and nothing is stored.

        Args:
            key: Cache key
            compute: Zero-argument coroutine function producing the value
            ttl: Lifetime override for the stored entry

        Returns:
            The cached or freshly computed value
        """
        if not self.enabled:
            return await compute()

        cached = self._lookup(key)
        if cached is not _MISSING:
            logger.debug("Cache hit: %s", key)
            return cached  # type: ignore[no-any-return]

        logger.debug("Cache miss: %s", key)
        if self.coalesce:
            return await self._compute_shared(key, compute, ttl)

        value = await compute()
        self.set(key, value, ttl)
        return value

    async def _compute_shared(
        self,
        key: Hashable,
        compute: Callable[[], Awaitable[V]],
        ttl: float | None,
    ) -> V:
        with self._lock:
            future = self._in_flight.get(key)
            owner = future is None
            if future is None:
                future = asyncio.get_running_loop().create_future()
                self._in_flight[key] = future

        if not owner:
            logger.debug("Joining in-flight computation: %s", key)
            return await asyncio.shield(future)  # type: ignore[no-any-return]

        try:
            value = await compute()
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            future.set_exception(e)
            # Mark retrieved so an unshared failure is not reported twice
            future.exception()
            raise
        else:
            self.set(key, value, ttl)
            future.set_result(value)
            return value
        finally:
            with self._lock:
                self._in_flight.pop(key, None)

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Cache cleared")

    def stats(self) -> dict[str, int]:
        """Hit, miss and size counters."""
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None


__all__ = ["CacheEntry", "Clock", "TTLCache"]
