"""Home route — greeting at "/" and the catch-all for unmatched paths.

Invariants:
    - Any method, any query string → 200 text/plain with the greeting first
    - Unmatched paths answer exactly like "/" while catch_all_home is on
"""

import logging
from datetime import datetime, timezone

import pytest

from toolkit_server.api.dependencies import get_now

FIXED_NOW = datetime(2024, 12, 1, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(app):
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    yield FIXED_NOW
    app.dependency_overrides.clear()


async def test_root_returns_greeting(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"] == "text/plain"
    assert res.text.splitlines()[0] == "Hello, World from Go!"


async def test_root_body_has_server_time_and_hint(client, frozen_clock):
    res = await client.get("/")
    assert res.text == (
        "Hello, World from Go!\n"
        "Server time: 2024-12-01 10:30:00\n"
        "Visit /api for JSON response\n"
    )


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def test_root_ignores_method(client, method):
    res = await client.request(method, "/")
    assert res.status_code == 200
    assert res.text.startswith("Hello, World from Go!\n")


async def test_root_accepts_head(client):
    res = await client.head("/")
    assert res.status_code == 200


async def test_root_ignores_query_string(client, frozen_clock):
    plain = await client.get("/")
    with_query = await client.get("/?name=gopher&page=2")
    assert with_query.status_code == 200
    assert with_query.text == plain.text


@pytest.mark.parametrize("path", ["/nonexistent", "/api/", "/API", "/health/extra", "/a/b/c"])
async def test_unmatched_path_matches_root_output(client, frozen_clock, path):
    root = await client.get("/")
    res = await client.get(path)
    assert res.status_code == 200
    assert res.headers["content-type"] == root.headers["content-type"]
    assert res.text == root.text


async def test_docs_paths_fall_through_to_catch_all(client):
    res = await client.get("/docs")
    assert res.status_code == 200
    assert res.text.startswith("Hello, World from Go!")


async def test_root_logs_method_and_path(client, caplog):
    caplog.set_level(logging.INFO, logger="toolkit_server.api.routes.home")
    await client.post("/somewhere")
    assert "HomeHandler called: POST /somewhere" in caplog.text
