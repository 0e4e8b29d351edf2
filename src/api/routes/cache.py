"""API routes for the snapshot cache."""

from litestar import Controller, delete, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.stats import SyncResponse
from services import create_stats_service


class CacheController(Controller):
    """Controller for cache maintenance."""

    path = "/cache"

    @post("/sync", status_code=HTTP_200_OK)
    async def sync(self) -> SyncResponse:
        """Fetch every page and replace the cached snapshot."""
        logger.info("API request to sync cache")

        service = create_stats_service()
        return SyncResponse(synced=await service.sync())

    @delete("/")
    async def clear(self) -> None:
        """Delete the cached snapshot."""
        logger.info("API request to clear cache")

        service = create_stats_service()
        await service.clear_cache()
