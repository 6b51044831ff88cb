"""Pokemon Route — GET /api/pokemon, the gateway's single read endpoint.

Invariants:
    - limit defaults to 20, offset to 0; both are plain-digit unsigned 32-bit, passed through unclamped
    - 200 with [{id, name}] in upstream order, or an empty-bodied 500 (see error_handlers)
    - Every call re-fetches from upstream
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from pokedex_gateway.core.domain_types import DEFAULT_LIMIT, DEFAULT_OFFSET, U32_MAX
from pokedex_gateway.core.upstream_protocols import PokedexClient
from pokedex_gateway.infrastructure.pokeapi_client import get_pokedex_client
from pokedex_gateway.schemas.pokemon import PlainDecimal, Pokemon
from pokedex_gateway.services.list_pokemon import list_pokemon

router = APIRouter(prefix="/api", tags=["pokemon"])


@router.get(
    "/pokemon",
    response_model=list[Pokemon],
    responses={500: {"description": "Upstream or extraction failure (empty body)"}},
)
async def get_pokemon(
    limit: Annotated[PlainDecimal, Query(ge=0, le=U32_MAX)] = DEFAULT_LIMIT,
    offset: Annotated[PlainDecimal, Query(ge=0, le=U32_MAX)] = DEFAULT_OFFSET,
    client: PokedexClient = Depends(get_pokedex_client),
):
    """List pokemon as {id, name} pairs."""
    return await list_pokemon(client, limit, offset)
