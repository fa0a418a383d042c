"""Service test fixtures — gateways over each backend.

Invariants:
    - The `gateway` fixture is parametrized over both backends, so every test
      using it runs against the local fallback and the remote store
    - Remote runs use the in-memory SQLite store from the root conftest
"""

import pytest

from showcase.services.use_case_gateway import UseCaseGateway

IMAGE_URL = "https://example.test/placeholder.png"


def _make_gateway(backend, sql_store, local_store):
    if backend == "local":
        return UseCaseGateway(
            None, local_store, use_local_fallback=True, default_image_url=IMAGE_URL,
        )
    return UseCaseGateway(
        sql_store, local_store, use_local_fallback=False, default_image_url=IMAGE_URL,
    )


@pytest.fixture
def local_gateway(sql_store, local_store):
    return _make_gateway("local", sql_store, local_store)


@pytest.fixture
def remote_gateway(sql_store, local_store):
    return _make_gateway("remote", sql_store, local_store)


@pytest.fixture(params=["local", "remote"])
def gateway(request, sql_store, local_store):
    return _make_gateway(request.param, sql_store, local_store)
