"""API test fixtures — FastAPI app over httpx AsyncClient.

Invariants:
    - app.state.catalog is set per test (ASGITransport does not run the lifespan)
    - dependency_overrides cleared after every test

Design Decisions:
    - ASGITransport over a live server: in-process, no network
"""

import pytest
from httpx import ASGITransport, AsyncClient

from modroster.main import app


@pytest.fixture
async def client(catalog):
    app.state.catalog = catalog
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
