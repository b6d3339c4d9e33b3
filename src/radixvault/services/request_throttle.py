"""Request throttle for outbound network calls.

Every call to the remote hosts passes through one shared throttle so that
the number of calls in flight never exceeds the configured limit
(one by default). Waiters are admitted in arrival order.
"""

from __future__ import annotations

import asyncio
import logging
import types
from typing import Awaitable, Callable, TypeVar

from typing_extensions import Self

from radixvault.shared.constants import NetworkConfig
from radixvault.shared.errors import ApplicationError, ErrorCode, ErrorContext
from radixvault.shared.logging import log_operation_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestThrottle:
    """FIFO admission gate limiting concurrent network calls.

    Can be used through :meth:`admit` or as an async context manager.
    A task that raises releases the gate; its exception reaches only its
    own caller.

    Args:
        concurrency_limit: Maximum number of calls in flight (default: 1)
    """

    def __init__(
        self,
        concurrency_limit: int = NetworkConfig.DEFAULT_CONCURRENT_REQUESTS,
    ) -> None:
        if concurrency_limit <= 0:
            error = ApplicationError(
                code=ErrorCode.VALIDATION_ERROR,
                message=f"Concurrency limit must be positive, got: {concurrency_limit}",
                context=ErrorContext(
                    operation="request_throttle_init",
                    additional_data={"concurrency_limit": concurrency_limit},
                ),
            )
            log_operation_error(logger=logger, error=error)
            raise error

        self.concurrency_limit = concurrency_limit
        # asyncio.Semaphore wakes waiters in FIFO order
        self._semaphore = asyncio.Semaphore(concurrency_limit)
        self._active_count = 0
        self._high_water_mark = 0

    @property
    def active_count(self) -> int:
        """Number of admitted calls currently running."""
        return self._active_count

    @property
    def high_water_mark(self) -> int:
        """Largest number of calls ever in flight at once."""
        return self._high_water_mark

    async def admit(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run ``task`` once the gate admits it and return its result.

        Args:
            task: Zero-argument coroutine function performing one call

        Returns:
            Whatever the task returns
        """
        async with self:
            return await task()

    async def __aenter__(self) -> Self:
        await self._semaphore.acquire()
        self._active_count += 1
        self._high_water_mark = max(self._high_water_mark, self._active_count)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self._active_count -= 1
        self._semaphore.release()

    def __repr__(self) -> str:
        return (
            f"RequestThrottle(concurrency_limit={self.concurrency_limit}, "
            f"active_count={self._active_count})"
        )


__all__ = ["RequestThrottle"]
