from typing import Optional

from infrastructure.config import Settings, load_settings
from services.cache import SnapshotCache
from services.stats import StatsService


def create_stats_service(settings: Optional[Settings] = None) -> StatsService:
    """Factory function to create stats service with all dependencies."""
    from application.orchestrator import AsyncStatsOrchestrator
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.storage import LocalBlobStorage

    settings = settings or load_settings()

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=settings.http_timeout)
    storage = LocalBlobStorage(settings.cache_dir.parent)

    return StatsService(
        orchestrator=AsyncStatsOrchestrator(http_client, settings.cookie_header),
        cache=SnapshotCache(storage, folder=settings.cache_dir.name, file_name=settings.cache_file),
        compact=settings.compact,
    )


__all__ = ["SnapshotCache", "StatsService", "create_stats_service"]
