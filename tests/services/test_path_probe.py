"""Tests for PathProbe."""

import logging

import pytest

from radixvault.services.path_probe import PathProbe
from radixvault.shared.errors import ApplicationError, NotFoundError, UpstreamError

BASE = "https://raw.githubusercontent.com/radix-ui/themes/main/src/components/button"
CANDIDATES = [".tsx", ".ts", "/index.tsx", "/index.ts"]


class TestResolveText:
    """Ordered candidate probing."""

    @pytest.mark.asyncio
    async def test_stops_at_first_success(self, context, fake_fetcher):
        # Given
        fake_fetcher.responses[f"{BASE}/index.tsx"] = "export const Button = 1;"
        fake_fetcher.responses[f"{BASE}/index.ts"] = "unused"
        probe = PathProbe(context)

        # When
        text = await probe.resolve_text("button", BASE, CANDIDATES)

        # Then
        assert text == "export const Button = 1;"
        assert fake_fetcher.calls == [f"{BASE}.tsx", f"{BASE}.ts", f"{BASE}/index.tsx"]

    @pytest.mark.asyncio
    async def test_first_candidate_hit_fetches_once(self, context, fake_fetcher):
        fake_fetcher.responses[f"{BASE}.tsx"] = "source"

        assert await PathProbe(context).resolve_text("button", BASE, CANDIDATES) == "source"
        assert len(fake_fetcher.calls) == 1

    @pytest.mark.asyncio
    async def test_any_network_failure_moves_on(self, context, fake_fetcher):
        fake_fetcher.responses[f"{BASE}.tsx"] = UpstreamError("boom", status_code=500)
        fake_fetcher.responses[f"{BASE}.ts"] = "fallback"

        assert await PathProbe(context).resolve_text("button", BASE, CANDIDATES) == "fallback"

    @pytest.mark.asyncio
    async def test_all_candidates_fail(self, context, fake_fetcher, caplog):
        with caplog.at_level(logging.WARNING):
            with pytest.raises(NotFoundError) as exc_info:
                await PathProbe(context).resolve_text("ghost", BASE, CANDIDATES)

        assert exc_info.value.message == '"ghost" not found in repository'
        assert exc_info.value.context.identifier == "ghost"
        assert len(fake_fetcher.calls) == 4

    @pytest.mark.asyncio
    async def test_empty_candidates(self, context, fake_fetcher):
        with pytest.raises(ApplicationError):
            await PathProbe(context).resolve_text("button", BASE, [])

        assert fake_fetcher.calls == []
