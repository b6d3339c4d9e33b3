"""HTTP fetcher for the GitHub hosts.

Issues single GET requests with a bounded timeout and retries transient
statuses with exponential backoff. Every failure leaves this module as one
of the RadixVaultNetworkError subclasses so callers never see aiohttp
exceptions.
"""

from __future__ import annotations

import asyncio
import logging
import time
import types
from collections.abc import Mapping
from enum import Enum
from typing import Any, Awaitable, Callable

import aiohttp
from typing_extensions import Self

from radixvault.config.models.github_settings import GitHubSettings
from radixvault.shared.constants import GitHubConfig, HTTPStatusCodes, NetworkConfig
from radixvault.shared.errors import (
    AuthenticationError,
    ErrorCode,
    ErrorContext,
    MalformedResponseError,
    NetworkTimeoutError,
    NotFoundError,
    RadixVaultNetworkError,
    RateLimitError,
    UpstreamError,
)
from radixvault.shared.logging import log_api_call

logger = logging.getLogger(__name__)


class HostKind(str, Enum):
    """Remote host a request goes to."""

    RAW = "raw"
    METADATA = "metadata"


class RetryingFetcher:
    """GET requests with timeout, retry policy and error normalization.

    Retries up to ``retry_attempts`` additional times on 408, 429, 500,
    502, 503 and 504, plus 413 on the metadata API. 401, 403, 404, any
    other status and transport failures are surfaced immediately. A
    transport failure (timeout, refused connection, DNS) is reported as
    NetworkTimeoutError.

    Args:
        settings: GitHub host settings (timeout, retries, token)
        sleep: Coroutine used for backoff waits (replaced in tests)
    """

    def __init__(
        self,
        settings: GitHubSettings | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.settings = settings or GitHubSettings()
        self._token = self.settings.token.strip()
        self._sleep = sleep
        self._session: aiohttp.ClientSession | None = None
        self._request_count = 0

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    @property
    def request_count(self) -> int:
        """Number of HTTP requests sent, retries included."""
        return self._request_count

    def set_token(self, token: str | None) -> None:
        """Set the bearer token; an empty or blank token removes it."""
        self._token = (token or "").strip()
        if self._token:
            logger.info("GitHub API token updated")
        else:
            logger.info("GitHub API token removed, using unauthenticated requests")

    def build_headers(self, host: HostKind) -> dict[str, str]:
        """Default headers for a host. The raw host is never authenticated."""
        headers = {"User-Agent": self.settings.user_agent}
        if host is HostKind.METADATA:
            headers["Accept"] = GitHubConfig.ACCEPT_HEADER
            if self._token:
                headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def fetch_text(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        *,
        host: HostKind = HostKind.RAW,
    ) -> str:
        """Fetch a URL and return the body as text.

        Raises:
            RadixVaultNetworkError: On any failure, see the class docstring
        """
        body = await self._request(url, headers, host=host, parse_json=False)
        return str(body)

    async def fetch_json(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        *,
        host: HostKind = HostKind.METADATA,
    ) -> Any:
        """Fetch a URL and return the decoded JSON body.

        Raises:
            MalformedResponseError: If the body is not valid JSON
            RadixVaultNetworkError: On any other failure
        """
        return await self._request(url, headers, host=host, parse_json=True)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout),
            )
        return self._session

    async def _send(
        self,
        url: str,
        headers: Mapping[str, str],
        *,
        parse_json: bool,
    ) -> tuple[int, Any, Mapping[str, str]]:
        """Send one GET request.

        Returns:
            Tuple of (status, body, response headers). Body is None for
            non-2xx responses.
        """
        session = await self._get_session()
        async with session.get(url, headers=dict(headers)) as response:
            if not HTTPStatusCodes.is_success(response.status):
                return response.status, None, response.headers
            if parse_json:
                body = await response.json(content_type=None)
            else:
                body = await response.text()
            return response.status, body, response.headers

    def _retry_statuses(self, host: HostKind) -> frozenset[int]:
        if host is HostKind.METADATA:
            return NetworkConfig.RETRY_STATUS_CODES | NetworkConfig.METADATA_EXTRA_RETRY_STATUS_CODES
        return NetworkConfig.RETRY_STATUS_CODES

    def _retry_delay(self, attempt: int, retry_after: str | None) -> float:
        if retry_after is not None:
            try:
                return min(float(retry_after), NetworkConfig.MAX_RETRY_DELAY)
            except ValueError:
                logger.debug("Ignoring non-numeric Retry-After header: %s", retry_after)
        return min(self.settings.retry_delay * (2**attempt), NetworkConfig.MAX_RETRY_DELAY)

    async def _request(
        self,
        url: str,
        headers: Mapping[str, str] | None,
        *,
        host: HostKind,
        parse_json: bool,
    ) -> Any:
        request_headers = {**self.build_headers(host), **(headers or {})}
        retry_statuses = self._retry_statuses(host)
        max_attempts = self.settings.retry_attempts + 1

        for attempt in range(max_attempts):
            start_time = time.perf_counter()
            self._request_count += 1
            try:
                status, body, response_headers = await self._send(
                    url,
                    request_headers,
                    parse_json=parse_json,
                )
            except asyncio.TimeoutError as e:
                raise NetworkTimeoutError(
                    f"Request to {url} timed out after {self.settings.timeout}s",
                    context=self._context(url, attempt),
                    original_error=e,
                ) from e
            except aiohttp.ClientError as e:
                raise NetworkTimeoutError(
                    f"Request to {url} failed: {e}",
                    context=self._context(url, attempt),
                    original_error=e,
                    code=ErrorCode.NETWORK_ERROR,
                ) from e
            except ValueError as e:
                raise MalformedResponseError(
                    f"Response from {url} is not valid JSON",
                    context=self._context(url, attempt),
                    original_error=e,
                ) from e

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_api_call(
                logger,
                endpoint=url,
                status_code=status,
                duration_ms=duration_ms,
                context={"attempt": attempt + 1, "host": host.value},
            )

            if HTTPStatusCodes.is_success(status):
                return body

            if status in retry_statuses and attempt + 1 < max_attempts:
                retry_after = (
                    response_headers.get("Retry-After")
                    if status == HTTPStatusCodes.TOO_MANY_REQUESTS
                    else None
                )
                delay = self._retry_delay(attempt, retry_after)
                logger.warning(
                    "Transient status %d from %s, retrying in %.2fs (attempt %d/%d)",
                    status,
                    url,
                    delay,
                    attempt + 1,
                    max_attempts,
                )
                await self._sleep(delay)
                continue

            raise self._status_error(status, url, attempt, exhausted=status in retry_statuses)

        raise AssertionError("unreachable")

    def _context(self, url: str, attempt: int, status: int | None = None) -> ErrorContext:
        additional: dict[str, int] = {"attempt": attempt + 1}
        if status is not None:
            additional["status_code"] = status
        return ErrorContext(operation="http_fetch", url=url, additional_data=additional)

    def _status_error(
        self,
        status: int,
        url: str,
        attempt: int,
        *,
        exhausted: bool,
    ) -> RadixVaultNetworkError:
        """Map a final non-2xx status to its error kind."""
        context = self._context(url, attempt, status)

        if status == HTTPStatusCodes.UNAUTHORIZED:
            return AuthenticationError(
                f"Authentication failed for {url}",
                context=context,
                status_code=status,
            )
        if status == HTTPStatusCodes.FORBIDDEN:
            return RateLimitError(
                f"Access to {url} refused (rate limit exceeded)",
                context=context,
                status_code=status,
            )
        if status == HTTPStatusCodes.NOT_FOUND:
            return NotFoundError(
                f"Resource not found: {url}",
                context=context,
                status_code=status,
            )
        if exhausted and status in NetworkConfig.TIMEOUT_STATUS_CODES:
            return NetworkTimeoutError(
                f"Request to {url} kept timing out (status {status}) after {attempt + 1} attempts",
                context=context,
                status_code=status,
            )

        code = (
            ErrorCode.API_SERVER_ERROR
            if HTTPStatusCodes.is_server_error(status)
            else ErrorCode.API_REQUEST_FAILED
        )
        suffix = f" after {attempt + 1} attempts" if exhausted else ""
        return UpstreamError(
            f"Request to {url} failed with status {status}{suffix}",
            context=context,
            status_code=status,
            code=code,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("HTTP session closed")
        self._session = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        await self.close()


__all__ = ["HostKind", "RetryingFetcher"]
