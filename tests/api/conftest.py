"""API test fixtures: isolated app per test + httpx client.

Invariants:
    - Every test gets a fresh app from create_app(), so stores start at seed data
    - `client` sends a valid bearer token; `anon_client` sends none
    - Lifespan is not run by ASGITransport: no log file is written during tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from cardlist.config import Settings
from cardlist.main import create_app

from tests.api.credentials import API_TOKEN, AUTH_HEADERS


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        node_env="development",
        api_token=API_TOKEN,
        public_base_url="http://localhost:8000",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """Authenticated client. App exceptions are answered, not re-raised."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
        headers=AUTH_HEADERS,
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
