"""Pokemon Schemas — upstream list page (PokeAPI) and the simplified API response.

Invariants:
    - PokemonListPage mirrors PokeAPI's `/pokemon` shape: count, next, previous, results
    - Upstream shapes are strict: count is a JSON integer in 0..U32_MAX, strings are JSON strings
    - next/previous are optional and default to None when absent
    - Pokemon.id fits in an unsigned 32-bit integer
    - limit/offset query values are plain ASCII digits (no sign, space or exponent)

Design Decisions:
    - Upstream and response shapes kept in one module: they are only ever used together
    - Unknown upstream fields ignored (pydantic default) so upstream additions never break decoding
"""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from pokedex_gateway.core.domain_types import U32_MAX, UNSIGNED_DECIMAL


class UpstreamPokemon(BaseModel):
    """One entry of the upstream list: reference url + display name."""
    model_config = ConfigDict(strict=True)

    url: str
    name: str


class PokemonListPage(BaseModel):
    """Raw upstream page. Transient — discarded after transformation."""
    model_config = ConfigDict(strict=True)

    count: int = Field(ge=0, le=U32_MAX)
    next: str | None = None
    previous: str | None = None
    results: list[UpstreamPokemon]


class Pokemon(BaseModel):
    """Externally visible list item."""
    id: int = Field(ge=0, le=U32_MAX)
    name: str


def _require_plain_decimal(value):
    if isinstance(value, str) and not UNSIGNED_DECIMAL.fullmatch(value):
        raise ValueError("must be an unsigned base-10 integer")
    return value


# Query parameter type: range is applied by the route's Query(ge=, le=)
PlainDecimal = Annotated[int, BeforeValidator(_require_plain_decimal)]
