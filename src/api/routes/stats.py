"""API routes for rendered statistics."""

from litestar import Controller, MediaType, get, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.stats import StatsRequest
from rendering import render_profile_image_block
from services import create_stats_service


class StatsController(Controller):
    """Controller for the statistics fragment."""

    path = "/stats"

    @get("/", media_type=MediaType.HTML, status_code=HTTP_200_OK)
    async def get_stats(self, compact: bool | None = None, refresh: bool = True) -> str:
        """
        Render statistics without personal tasks.

        Query parameters:
        - compact: Use the compact layout (defaults to the configured mode)
        - refresh: Fetch live data before falling back to the cache
        """
        logger.debug(f"API request for stats: compact={compact}, refresh={refresh}")

        service = create_stats_service()
        return await service.render("", compact=compact, refresh=refresh)

    @post("/", media_type=MediaType.HTML, status_code=HTTP_200_OK)
    async def post_stats(self, data: StatsRequest) -> str:
        """Render statistics with personal tasks taken from the block text."""
        logger.debug(f"API request for stats block: compact={data.compact}, refresh={data.refresh}")

        service = create_stats_service()
        return await service.render(data.source, compact=data.compact, refresh=data.refresh)


class ProfileController(Controller):
    """Controller for the profile image block."""

    path = "/profile"

    @get("/", media_type=MediaType.HTML, status_code=HTTP_200_OK)
    async def get_profile(self, account: str = "") -> str:
        return str(render_profile_image_block(f"account={account}"))
