"""Service producing the rendered statistics fragment."""

from typing import Optional

from loguru import logger

from application.orchestrator import AsyncStatsOrchestrator
from domain.models import CacheData
from domain.parsers import extract_sources
from infrastructure.errors import EulerStatsError, SnapshotUnavailableError
from rendering import render_error, render_refresh_hint, render_snapshot

from .cache import SnapshotCache


class StatsService:
    """Fetches, caches and renders statistics."""

    def __init__(
        self,
        *,
        orchestrator: AsyncStatsOrchestrator,
        cache: SnapshotCache,
        compact: bool = False,
    ):
        """Initialize service with dependencies."""
        self.orchestrator = orchestrator
        self.cache = cache
        self.compact = compact

    async def fetch_snapshot(self) -> CacheData:
        """
        Run a live fetch cycle and store the result.

        Raises:
            EulerStatsError: If any page fails to load
        """
        snapshot = await self.orchestrator.fetch_snapshot()
        await self.cache.save(snapshot)
        return snapshot

    async def get_snapshot(self, refresh: bool = True) -> CacheData:
        """
        Live snapshot when ``refresh`` is set, falling back to the cached one.

        Raises:
            SnapshotUnavailableError: If neither source has data
        """
        if refresh:
            try:
                return await self.fetch_snapshot()
            except EulerStatsError as e:
                logger.warning(f"Live fetch failed, falling back to cache: {e}")

        cached = await self.cache.load()
        if cached is not None:
            logger.info("Using cached snapshot")
            return cached

        if not refresh:
            logger.info("No cached snapshot, fetching live")
            try:
                return await self.fetch_snapshot()
            except EulerStatsError as e:
                logger.warning(f"Live fetch failed: {e}")

        raise SnapshotUnavailableError()

    async def render(
        self,
        source_text: str = "",
        compact: Optional[bool] = None,
        refresh: bool = True,
    ) -> str:
        """Render the stats fragment; failures become a one-line fragment instead of raising."""
        use_compact = self.compact if compact is None else compact

        try:
            source = extract_sources(source_text)
            snapshot = await self.get_snapshot(refresh=refresh)
            return str(render_snapshot(snapshot, source, use_compact))
        except SnapshotUnavailableError:
            return str(render_refresh_hint())
        except Exception as e:
            logger.error(f"Failed to render statistics: {e}")
            return str(render_error(f"Error fetching progress: {e}."))

    async def sync(self) -> bool:
        """Fetch and cache without rendering."""
        try:
            await self.fetch_snapshot()
            return True
        except EulerStatsError as e:
            logger.error(f"Sync failed: {e}")
            return False

    async def clear_cache(self) -> bool:
        return await self.cache.clear()
