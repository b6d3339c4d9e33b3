"""Test doubles and literal token sources shared by the test suite."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from radixvault.services.http_fetcher import HostKind
from radixvault.shared.errors import NotFoundError


class FakeFetcher:
    """Stand-in for RetryingFetcher serving canned responses.

    A response may be a string, any JSON value or an exception instance,
    which is raised. Unknown URLs raise NotFoundError like a 404 would.
    """

    def __init__(self, responses: Mapping[str, Any] | None = None, delay: float = 0.0) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.token: str | None = None
        self.closed = False

    async def _serve(self, url: str) -> Any:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Yield so overlapping calls would be observable
            await asyncio.sleep(self.delay)
            if url not in self.responses:
                raise NotFoundError(f"Resource not found: {url}", status_code=404)
            value = self.responses[url]
            if isinstance(value, BaseException):
                raise value
            return value
        finally:
            self.in_flight -= 1

    async def fetch_text(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        *,
        host: HostKind = HostKind.RAW,
    ) -> str:
        return await self._serve(url)

    async def fetch_json(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        *,
        host: HostKind = HostKind.METADATA,
    ) -> Any:
        return await self._serve(url)

    def set_token(self, token: str | None) -> None:
        self.token = (token or "").strip() or None

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


RAW = "https://raw.githubusercontent.com/radix-ui"
API = "https://api.github.com/repos/radix-ui"

LIGHT_URL = f"{RAW}/colors/main/src/light.ts"
DARK_URL = f"{RAW}/colors/main/src/dark.ts"
BLACK_A_URL = f"{RAW}/colors/main/src/blackA.ts"

LIGHT_SOURCE = """
export const blue = {
  blue1: "#fbfdff",
  blue2: "#f4faff",
};

export const blueA = {
  blueA1: "#0080ff04",
  blueA2: "#008cff0b",
};

export const blueP3 = {
  blue1: "color(display-p3 0.986 0.992 0.999)",
};

export const red = {
  red1: "#fffcfc",
};
"""

DARK_SOURCE = """
export const blue = {
  blue1: '#0d1520',
  blue2: '#111927',
};
"""

BLACK_A_SOURCE = """
export const blackA = {
  blackA1: "rgba(0, 0, 0, 0.05)",
  blackA2: "rgba(0, 0, 0, 0.1)",
};

export const blackP3A = {
  blackA1: "color(display-p3 0 0 0 / 0.05)",
};
"""
