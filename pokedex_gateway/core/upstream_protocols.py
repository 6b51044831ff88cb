"""Boundary Protocols — contract between the list service and the upstream client.

Invariants:
    - Services depend on PokedexClient, never on the concrete httpx-backed client
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass a plain fake
"""

from typing import Protocol

from pokedex_gateway.schemas.pokemon import PokemonListPage


class PokedexClient(Protocol):
    """Contract for fetching one page of the upstream pokemon list."""
    async def fetch_page(self, limit: int, offset: int) -> PokemonListPage: ...
