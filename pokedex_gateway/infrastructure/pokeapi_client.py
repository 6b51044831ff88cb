"""PokeAPI Client — validated base url + reusable httpx client for the pokemon list.

Invariants:
    - Base url is absolute http/https with a host, validated once at construction
    - One GET per fetch_page call, no retries
    - Non-2xx → UpstreamHttpError, transport failure → UpstreamTransportError,
      undecodable body → UpstreamDecodeError (core/errors.py)

Design Decisions:
    - Single httpx.AsyncClient per process: connection pooling is httpx's concern
    - follow_redirects=True: upstream answers to redirects are followed, not treated as errors
    - RFC 3986 join for the resource path: a base without trailing slash drops its last segment
"""

import logging

import httpx
from fastapi import Request
from pydantic import ValidationError

from pokedex_gateway.core.domain_types import POKEMON_RESOURCE
from pokedex_gateway.core.errors import (
    InvalidBaseUrlError,
    UpstreamDecodeError,
    UpstreamHttpError,
    UpstreamTransportError,
)
from pokedex_gateway.schemas.pokemon import PokemonListPage

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def parse_base_url(base_url: str) -> httpx.URL:
    """Parse and validate the upstream base url. Raises InvalidBaseUrlError."""
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidBaseUrlError(base_url, f"does not parse ({e})")
    if url.scheme not in _ALLOWED_SCHEMES:
        raise InvalidBaseUrlError(
            base_url, f"scheme must be http or https, got {url.scheme!r}",
        )
    if not url.host:
        raise InvalidBaseUrlError(base_url, "cannot be used as a base (no host)")
    return url


class PokeApiClient:
    """Fetches pages of the upstream pokemon list."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base = parse_base_url(base_url)
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            follow_redirects=True,
        )

    @property
    def list_url(self) -> httpx.URL:
        return self.base.join(POKEMON_RESOURCE)

    async def fetch_page(self, limit: int, offset: int) -> PokemonListPage:
        """GET {base}pokemon?limit=..&offset=.. and decode the page."""
        url = self.list_url
        params = {"limit": str(limit), "offset": str(offset)}
        try:
            response = await self.http_client.get(url, params=params)
        except httpx.RequestError as e:
            raise UpstreamTransportError(str(url), f"{type(e).__name__}: {e}")

        if not response.is_success:
            raise UpstreamHttpError(str(response.request.url), response.status_code)

        try:
            page = PokemonListPage.model_validate_json(response.content)
        except ValidationError as e:
            raise UpstreamDecodeError(
                str(response.request.url), f"{e.error_count()} validation error(s)",
            )

        logger.debug(
            f"Fetched {len(page.results)} pokemon from upstream",
            extra={"upstream_url": str(response.request.url), "count": page.count},
        )
        return page

    async def aclose(self) -> None:
        """Release the HTTP client if this instance created it."""
        if self._owns_client:
            await self.http_client.aclose()


def get_pokedex_client(request: Request) -> PokeApiClient:
    """FastAPI dependency for the shared upstream client."""
    client = getattr(request.app.state, "pokedex_client", None)
    if client is None:
        raise RuntimeError("Pokedex client not initialized")
    return client
