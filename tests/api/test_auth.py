"""Bearer Token Gate: every route requires the configured token.

Invariants:
    - Missing, malformed or wrong credentials → 401 {"error": "Unauthorized request"}
    - Rejected requests never mutate the stores
    - Only failures are logged
    - An empty configured token rejects everything
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from cardlist.api.middleware import extract_bearer_token, is_authorized
from cardlist.config import Settings
from cardlist.main import create_app
from tests.api.credentials import API_TOKEN, AUTH_HEADERS

UNAUTHORIZED = {"error": "Unauthorized request"}


@pytest.mark.parametrize("path", ["/cards", "/cards/1", "/lists", "/lists/1", "/nope"])
async def test_missing_header_rejected(anon_client, path):
    res = await anon_client.get(path)
    assert res.status_code == 401
    assert res.json() == UNAUTHORIZED


@pytest.mark.parametrize("authorization", [
    "Bearer wrong",
    "Bearer",
    API_TOKEN,
    "",
    f"Bearer {API_TOKEN}x",
])
async def test_bad_credentials_rejected(anon_client, authorization):
    res = await anon_client.get("/cards", headers={"Authorization": authorization})
    assert res.status_code == 401
    assert res.json() == UNAUTHORIZED


async def test_valid_token_accepted(anon_client):
    res = await anon_client.get("/cards", headers=AUTH_HEADERS)
    assert res.status_code == 200


async def test_rejected_create_does_not_mutate(anon_client, app):
    res = await anon_client.post("/cards", json={"title": "t", "content": "c"})
    assert res.status_code == 401
    res = await anon_client.post("/lists", json={"header": "h"})
    assert res.status_code == 401
    assert len(app.state.card_store) == 3
    assert len(app.state.list_store) == 1


async def test_failure_is_logged(anon_client, caplog):
    with caplog.at_level(logging.ERROR, logger="cardlist.api.middleware"):
        await anon_client.get("/cards")
    assert "Unauthorized request to path: /cards" in caplog.text


async def test_success_is_not_logged(anon_client, caplog):
    with caplog.at_level(logging.DEBUG, logger="cardlist.api.middleware"):
        await anon_client.get("/cards", headers=AUTH_HEADERS)
    assert not [r for r in caplog.records if r.name == "cardlist.api.middleware"]


async def test_empty_configured_token_fails_closed():
    app = create_app(Settings(_env_file=None, api_token=""))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        assert (await c.get("/cards")).status_code == 401
        res = await c.get("/cards", headers={"Authorization": "Bearer "})
        assert res.status_code == 401


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("Bearer   abc  ") == "abc"
    assert extract_bearer_token("Bearer") is None
    assert extract_bearer_token(None) is None


def test_is_authorized_requires_configured_token():
    assert is_authorized("Bearer abc", "abc")
    assert not is_authorized("Bearer abc", "")
    assert not is_authorized(None, "abc")
