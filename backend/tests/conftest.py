"""
HelloUsers Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the test suite.

Fixtures:
    ├── test_client: HTTPX AsyncClient bound to the module-level app
    └── fresh_app: A newly built app, for tests that register extra routes
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["HELLOUSERS_LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest.fixture
def fresh_app():
    """
    Provides an app instance not shared with other tests.

    Why: Some tests add throwaway routes; they must not leak into `app`.
    """
    from hellousers.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    How:     ASGITransport routes requests straight into the app; no server,
             no lifespan.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from hellousers.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
