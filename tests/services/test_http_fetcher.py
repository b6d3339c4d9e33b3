"""Tests for RetryingFetcher.

The transport is replaced by patching ``_send``, which returns
``(status, body, headers)`` tuples, and backoff sleeps are recorded by an
AsyncMock instead of waiting.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from radixvault.config.models.github_settings import GitHubSettings
from radixvault.services.http_fetcher import HostKind, RetryingFetcher
from radixvault.shared.errors import (
    AuthenticationError,
    ErrorCode,
    MalformedResponseError,
    NetworkTimeoutError,
    NotFoundError,
    RateLimitError,
    UpstreamError,
)

URL = "https://raw.githubusercontent.com/radix-ui/themes/main/README.md"
API_URL = "https://api.github.com/repos/radix-ui/primitives/contents/packages/react"


@pytest.fixture
def sleep():
    return AsyncMock()


@pytest.fixture
def fetcher(sleep):
    return RetryingFetcher(GitHubSettings(retry_attempts=2, retry_delay=0.5), sleep=sleep)


def responses(*items):
    return AsyncMock(side_effect=list(items))


class TestRetryPolicy:
    """Status handling and retries."""

    @pytest.mark.asyncio
    async def test_success_first_try(self, fetcher, sleep):
        with patch.object(fetcher, "_send", responses((200, "hello", {}))) as send:
            assert await fetcher.fetch_text(URL) == "hello"

        assert send.await_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transient_status_then_success(self, fetcher, sleep):
        # Given
        send = responses((503, None, {}), (502, None, {}), (200, "body", {}))

        # When
        with patch.object(fetcher, "_send", send):
            result = await fetcher.fetch_text(URL)

        # Then
        assert result == "body"
        assert send.await_count == 3
        assert [c.args[0] for c in sleep.await_args_list] == [0.5, 1.0]
        assert fetcher.request_count == 3

    @pytest.mark.asyncio
    async def test_not_found_is_not_retried(self, fetcher, sleep):
        with patch.object(fetcher, "_send", responses((404, None, {}))) as send:
            with pytest.raises(NotFoundError) as exc_info:
                await fetcher.fetch_text(URL)

        assert exc_info.value.status_code == 404
        assert URL in exc_info.value.message
        assert send.await_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_forbidden_is_rate_limit(self, fetcher):
        with patch.object(fetcher, "_send", responses((403, None, {}))) as send:
            with pytest.raises(RateLimitError) as exc_info:
                await fetcher.fetch_json(API_URL)

        assert exc_info.value.code == ErrorCode.API_RATE_LIMIT
        assert send.await_count == 1

    @pytest.mark.asyncio
    async def test_unauthorized(self, fetcher):
        with patch.object(fetcher, "_send", responses((401, None, {}))):
            with pytest.raises(AuthenticationError):
                await fetcher.fetch_json(API_URL)

    @pytest.mark.asyncio
    async def test_exhausted_server_error(self, fetcher, sleep):
        send = responses(*[(503, None, {})] * 3)

        with patch.object(fetcher, "_send", send):
            with pytest.raises(UpstreamError) as exc_info:
                await fetcher.fetch_text(URL)

        assert exc_info.value.status_code == 503
        assert exc_info.value.code == ErrorCode.API_SERVER_ERROR
        assert send.await_count == 3
        assert sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_exhausted_gateway_timeout_is_timeout(self, fetcher):
        with patch.object(fetcher, "_send", responses(*[(504, None, {})] * 3)):
            with pytest.raises(NetworkTimeoutError) as exc_info:
                await fetcher.fetch_text(URL)

        assert exc_info.value.status_code == 504

    @pytest.mark.asyncio
    async def test_other_client_status_fails_immediately(self, fetcher):
        with patch.object(fetcher, "_send", responses((422, None, {}))) as send:
            with pytest.raises(UpstreamError) as exc_info:
                await fetcher.fetch_json(API_URL)

        assert exc_info.value.code == ErrorCode.API_REQUEST_FAILED
        assert send.await_count == 1

    @pytest.mark.asyncio
    async def test_payload_too_large_retried_on_metadata_only(self, fetcher):
        # Given
        metadata_send = responses((413, None, {}), (200, [], {}))
        raw_send = responses((413, None, {}))

        # When
        with patch.object(fetcher, "_send", metadata_send):
            listing = await fetcher.fetch_json(API_URL, host=HostKind.METADATA)
        with patch.object(fetcher, "_send", raw_send):
            with pytest.raises(UpstreamError):
                await fetcher.fetch_text(URL, host=HostKind.RAW)

        # Then
        assert listing == []
        assert metadata_send.await_count == 2
        assert raw_send.await_count == 1

    @pytest.mark.asyncio
    async def test_retry_after_header_on_429(self, fetcher, sleep):
        send = responses((429, None, {"Retry-After": "7"}), (200, "ok", {}))

        with patch.object(fetcher, "_send", send):
            await fetcher.fetch_text(URL)

        sleep.assert_awaited_once_with(7.0)

    @pytest.mark.asyncio
    async def test_non_numeric_retry_after_falls_back_to_backoff(self, fetcher, sleep):
        send = responses((429, None, {"Retry-After": "soon"}), (200, "ok", {}))

        with patch.object(fetcher, "_send", send):
            await fetcher.fetch_text(URL)

        sleep.assert_awaited_once_with(0.5)

    @pytest.mark.asyncio
    async def test_zero_retry_attempts(self, sleep):
        fetcher = RetryingFetcher(GitHubSettings(retry_attempts=0), sleep=sleep)

        with patch.object(fetcher, "_send", responses((503, None, {}))) as send:
            with pytest.raises(UpstreamError):
                await fetcher.fetch_text(URL)

        assert send.await_count == 1
        sleep.assert_not_awaited()


class TestTransportErrors:
    """Exceptions raised by the transport are normalized."""

    @pytest.mark.asyncio
    async def test_timeout_is_not_retried(self, fetcher):
        send = AsyncMock(side_effect=asyncio.TimeoutError())

        with patch.object(fetcher, "_send", send):
            with pytest.raises(NetworkTimeoutError) as exc_info:
                await fetcher.fetch_text(URL)

        assert isinstance(exc_info.value.original_error, asyncio.TimeoutError)
        assert send.await_count == 1

    @pytest.mark.asyncio
    async def test_connection_failure_is_reported_as_timeout(self, fetcher):
        send = AsyncMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with patch.object(fetcher, "_send", send):
            with pytest.raises(NetworkTimeoutError) as exc_info:
                await fetcher.fetch_text(URL)

        assert exc_info.value.code == ErrorCode.NETWORK_ERROR
        assert send.await_count == 1

    @pytest.mark.asyncio
    async def test_invalid_json(self, fetcher):
        send = AsyncMock(side_effect=ValueError("Expecting value"))

        with patch.object(fetcher, "_send", send):
            with pytest.raises(MalformedResponseError):
                await fetcher.fetch_json(API_URL)


class TestHeaders:
    """Authentication and default headers."""

    def test_raw_host_is_never_authenticated(self):
        fetcher = RetryingFetcher(GitHubSettings(token="ghp_secret"))

        headers = fetcher.build_headers(HostKind.RAW)

        assert "Authorization" not in headers
        assert "User-Agent" in headers

    def test_metadata_host_with_token(self):
        fetcher = RetryingFetcher(GitHubSettings(token="ghp_secret"))

        headers = fetcher.build_headers(HostKind.METADATA)

        assert headers["Authorization"] == "Bearer ghp_secret"
        assert headers["Accept"] == "application/vnd.github+json"

    def test_metadata_host_without_token(self):
        fetcher = RetryingFetcher(GitHubSettings())

        assert "Authorization" not in fetcher.build_headers(HostKind.METADATA)
        assert not fetcher.has_token

    @pytest.mark.parametrize("token", ["", "   ", None])
    def test_blank_token_removes_authentication(self, token):
        fetcher = RetryingFetcher(GitHubSettings(token="ghp_secret"))

        fetcher.set_token(token)

        assert not fetcher.has_token
        assert "Authorization" not in fetcher.build_headers(HostKind.METADATA)

    @pytest.mark.asyncio
    async def test_caller_headers_are_merged(self, fetcher):
        send = responses((200, "ok", {}))

        with patch.object(fetcher, "_send", send):
            await fetcher.fetch_text(URL, {"X-Trace": "1"})

        sent_headers = send.await_args.args[1]
        assert sent_headers["X-Trace"] == "1"
        assert "User-Agent" in sent_headers

    @pytest.mark.asyncio
    async def test_close_without_session(self, fetcher):
        await fetcher.close()
