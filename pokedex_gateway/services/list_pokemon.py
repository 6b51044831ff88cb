"""List Pokemon — fetch one upstream page and reshape it into {id, name} items.

Invariants:
    - Exactly one upstream call per invocation (no cache, no retry)
    - Output order == upstream order
    - Batch failure: one bad record raises and discards every already-mapped item
    - Errors propagate as GatewayError subclasses; mapping to HTTP is the API layer's job

Design Decisions:
    - Impureim sandwich: async fetch (shell) around pure extract_pokemon (core)
"""

import logging

from pokedex_gateway.core.domain_types import DEFAULT_LIMIT, DEFAULT_OFFSET
from pokedex_gateway.core.extract_identifier import extract_pokemon
from pokedex_gateway.core.upstream_protocols import PokedexClient
from pokedex_gateway.schemas.pokemon import Pokemon

logger = logging.getLogger(__name__)


async def list_pokemon(
    client: PokedexClient,
    limit: int = DEFAULT_LIMIT,
    offset: int = DEFAULT_OFFSET,
) -> list[Pokemon]:
    """Fetch a page from upstream and extract every record, all-or-nothing."""
    page = await client.fetch_page(limit, offset)
    items = [extract_pokemon(record) for record in page.results]
    logger.info(
        f"Listed {len(items)} pokemon",
        extra={"limit": limit, "offset": offset, "count": len(items)},
    )
    return items
