"""Identifier Extraction — pure mapping from an upstream reference url to a Pokemon.

Invariants:
    - Pokemon.id is the integer value of the LAST path segment of the reference url
    - Pokemon.name is copied verbatim from the upstream record
    - Every failure raises a typed ExtractError subclass; nothing is defaulted
    - A single trailing slash is normalized away: `.../pokemon/25/` == `.../pokemon/25`
    - An authority with an invalid port or forbidden host characters is malformed

Design Decisions:
    - urllib.parse over an HTTP library's URL type: keeps core free of IO dependencies
    - ASCII-only digit match: int() alone would accept signs, whitespace, underscores
      and non-ASCII digits
"""

from urllib.parse import urlsplit

from pokedex_gateway.core.domain_types import PokemonId, U32_MAX, UNSIGNED_DECIMAL
from pokedex_gateway.core.errors import (
    EmptySegmentsError,
    MalformedUrlError,
    NoPathSegmentsError,
    NonNumericIdError,
)
from pokedex_gateway.schemas.pokemon import Pokemon, UpstreamPokemon

# Never valid inside a host name
_FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n<>\"{}|\\^`")


def extract_pokemon(record: UpstreamPokemon) -> Pokemon:
    """Map one upstream record to its {id, name} pair."""
    pokemon_id = parse_trailing_id(record.url, name=record.name)
    return Pokemon(id=pokemon_id, name=record.name)


def parse_trailing_id(reference: str, name: str | None = None) -> PokemonId:
    """Parse the numeric id from the final path segment of `reference`.

    `name` is only carried into the raised error for log context.
    """
    segments = _path_segments(reference, name)
    if segments and segments[-1] == "":
        segments.pop()
    if not segments:
        raise EmptySegmentsError(reference, name)

    last = segments[-1]
    if not UNSIGNED_DECIMAL.fullmatch(last):
        raise NonNumericIdError(reference, last, name)
    value = int(last)
    if value > U32_MAX:
        raise NonNumericIdError(reference, last, name)
    return PokemonId(value)


def _path_segments(reference: str, name: str | None) -> list[str]:
    """Split an absolute url's path on '/' (leading slash dropped)."""
    try:
        parts = urlsplit(reference)
        # .port raises ValueError for non-numeric or out-of-range ports
        parts.port
    except ValueError:
        raise MalformedUrlError(reference, name)
    if not parts.scheme:
        raise MalformedUrlError(reference, name)
    if parts.netloc and _FORBIDDEN_HOST_CHARS.intersection(parts.hostname or ""):
        raise MalformedUrlError(reference, name)

    # Opaque (e.g. mailto:, urn:): no authority and a rootless path
    if not parts.netloc and not parts.path.startswith("/"):
        raise NoPathSegmentsError(reference, name)

    if not parts.path:
        return []
    return parts.path.split("/")[1:]
