"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncIterator, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from subtrack.store import SubscriptionStore


@pytest.fixture
def store() -> SubscriptionStore:
    """A store seeded with the Netflix and Spotify fixture records."""
    return SubscriptionStore.with_fixtures()


@pytest.fixture
def app(store: SubscriptionStore) -> FastAPI:
    """An application serving the ``store`` fixture."""
    from subtrack.api.app import create_app

    return create_app(store=store)


@pytest_asyncio.fixture
async def http_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """An httpx client bound to the ASGI app, no network involved."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
