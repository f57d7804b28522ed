"""Root conftest — isolated app + ASGI client per test.

Invariants:
    - Every test gets a fresh app (fresh start time, no leaked dependency overrides)
    - Settings never read a developer's .env file
"""

import pytest
from httpx import ASGITransport, AsyncClient

from toolkit_server.config import Settings
from toolkit_server.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """Async test client; app exceptions become 500 responses, not test errors."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
