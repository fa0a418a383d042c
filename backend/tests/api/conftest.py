"""API test fixtures — FastAPI test client over a local-store gateway.

Invariants:
    - get_use_case_gateway dependency overridden; lifespan never runs
    - Every test gets an empty in-memory key-value store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from showcase.main import app
from showcase.services.use_case_gateway import UseCaseGateway, get_use_case_gateway


@pytest.fixture
def api_gateway(local_store):
    return UseCaseGateway(None, local_store, use_local_fallback=True)


@pytest.fixture
async def client(api_gateway):
    """FastAPI test client with the gateway dependency overridden."""
    app.dependency_overrides[get_use_case_gateway] = lambda: api_gateway
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
