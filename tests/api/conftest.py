"""API test fixtures — FastAPI app driven through httpx's ASGI transport.

Invariants:
    - get_pokedex_client overridden per test; no real upstream traffic
    - Overrides cleared after every test

Design Decisions:
    - ASGITransport does not run the lifespan, so the client is always injected
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from pokedex_gateway.infrastructure.pokeapi_client import PokeApiClient, get_pokedex_client
from pokedex_gateway.main import app


@pytest.fixture
def use_pokedex():
    """Install a pokedex client (fake or real) behind the route dependency."""
    def _install(client):
        app.dependency_overrides[get_pokedex_client] = lambda: client
        return client

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def mock_upstream(use_pokedex):
    """Real PokeApiClient whose HTTP traffic goes to a MockTransport handler.

    Returns a function taking `handler(request) -> httpx.Response`.
    """
    def _install(handler):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return use_pokedex(
            PokeApiClient("https://pokeapi.co/api/v2/", http_client=http_client),
        )

    return _install


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
