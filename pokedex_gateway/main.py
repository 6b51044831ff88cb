"""Pokedex Gateway API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery), API under /api, docs UI at /
    - Global error handlers map GatewayError → bare status code (never a detail body)
    - PokeApiClient built once on startup; an invalid base url aborts startup
    - The shared client is closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Client stored on app.state and injected via Depends: tests override the dependency
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pokedex_gateway import __version__
from pokedex_gateway.api.error_handlers import register_error_handlers
from pokedex_gateway.api.routes import health, pokemon
from pokedex_gateway.config import get_settings
from pokedex_gateway.infrastructure.observability import setup_logging
from pokedex_gateway.infrastructure.pokeapi_client import PokeApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.pokedex_client = PokeApiClient(
        settings.upstream_base_url,
        timeout_seconds=settings.upstream_timeout_seconds,
    )
    logger.info(
        "Pokedex Gateway started",
        extra={"upstream_url": str(app.state.pokedex_client.base)},
    )
    try:
        yield
    finally:
        await app.state.pokedex_client.aclose()
        app.state.pokedex_client = None
        logger.info("Pokedex Gateway shutting down")


def create_app() -> FastAPI:
    """Build the FastAPI app with routes and error handlers registered."""
    app = FastAPI(
        title="Pokedex Gateway",
        version=__version__,
        lifespan=lifespan,
        docs_url="/",
        redoc_url=None,
    )
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(pokemon.router)
    return app


app = create_app()
