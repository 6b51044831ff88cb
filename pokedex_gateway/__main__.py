"""Server bootstrap — `python -m pokedex_gateway` runs the app under uvicorn."""

import uvicorn

from pokedex_gateway.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "pokedex_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
