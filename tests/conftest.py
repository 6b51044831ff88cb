"""Root conftest — shared test configuration and upstream fakes."""

import json
import os

import pytest

from pokedex_gateway.schemas.pokemon import PokemonListPage

# Ensure tests never pick up a developer's real upstream from the environment
os.environ.setdefault("UPSTREAM_BASE_URL", "https://pokeapi.co/api/v2/")
os.environ.setdefault("LOG_FORMAT", "text")


BULBASAUR_PAGE = {
    "count": 2,
    "next": None,
    "previous": None,
    "results": [
        {"url": "https://pokeapi.co/api/v2/pokemon/1/", "name": "bulbasaur"},
        {"url": "https://pokeapi.co/api/v2/pokemon/2/", "name": "ivysaur"},
    ],
}


class FakePokedexClient:
    """Stands in for PokeApiClient: records calls, returns a page or raises."""

    def __init__(self, page: dict | None = None, error: Exception | None = None):
        self.page = page if page is not None else BULBASAUR_PAGE
        self.error = error
        self.calls: list[tuple[int, int]] = []

    async def fetch_page(self, limit: int, offset: int) -> PokemonListPage:
        self.calls.append((limit, offset))
        if self.error is not None:
            raise self.error
        return PokemonListPage.model_validate_json(json.dumps(self.page))


@pytest.fixture
def bulbasaur_page() -> dict:
    return {**BULBASAUR_PAGE, "results": list(BULBASAUR_PAGE["results"])}


@pytest.fixture
def fake_pokedex(bulbasaur_page) -> FakePokedexClient:
    return FakePokedexClient(bulbasaur_page)


@pytest.fixture
def make_pokedex():
    """Factory for FakePokedexClient with a custom page or error."""
    return FakePokedexClient
