"""
Pytest configuration and shared fixtures for RadixVault tests.

Every test gets its own ResolverContext backed by a fake fetcher and a
manual clock, so no cache or throttle state leaks between tests and
nothing touches the network.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from radixvault.config.models.settings import Settings
from radixvault.services.context import ResolverContext
from radixvault.services.resolver import Resolver
from tests.helpers import FakeClock, FakeFetcher


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher(delay=0.001)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def context(settings: Settings, fake_fetcher: FakeFetcher, fake_clock: FakeClock) -> ResolverContext:
    return ResolverContext.from_settings(settings, fetcher=fake_fetcher, clock=fake_clock)


@pytest.fixture
def resolver(context: ResolverContext) -> Resolver:
    return Resolver(context)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """Undo setup_structured_logger() so caplog keeps seeing records."""
    yield
    package_logger = logging.getLogger("radixvault")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
