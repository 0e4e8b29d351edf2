"""Litestar application serving the statistics fragments."""

import sys

from litestar import Litestar
from loguru import logger

from api.routes import CacheController, ProfileController, StatsController
from infrastructure.config import load_settings


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def create_app() -> Litestar:
    settings = load_settings()
    configure_logging(settings.log_level)

    if not settings.has_credentials:
        logger.warning("EULER_SESSION_ID or EULER_KEEP_ALIVE is not set, only cached data will load")

    return Litestar(route_handlers=[StatsController, ProfileController, CacheController])


def main() -> None:
    import uvicorn

    uvicorn.run(create_app(), host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
