"""Unit tests for the stats service: live fetch, cache fallback and rendering."""

import pytest
from unittest.mock import AsyncMock

from infrastructure.errors import EulerStatsError, PageFetchError, SnapshotUnavailableError
from rendering import REFRESH_HINT
from services.stats import StatsService


def make_service(snapshot=None, cached=None, fetch_error=None, compact=False):
    orchestrator = AsyncMock()
    if fetch_error is not None:
        orchestrator.fetch_snapshot.side_effect = fetch_error
    else:
        orchestrator.fetch_snapshot.return_value = snapshot

    cache = AsyncMock()
    cache.load.return_value = cached
    cache.save.return_value = True
    cache.clear.return_value = True

    return StatsService(orchestrator=orchestrator, cache=cache, compact=compact)


@pytest.mark.asyncio
async def test_live_snapshot_is_saved(snapshot):
    service = make_service(snapshot=snapshot)

    result = await service.get_snapshot()

    assert result is snapshot
    service.cache.save.assert_awaited_once_with(snapshot)
    service.cache.load.assert_not_awaited()


@pytest.mark.asyncio
async def test_failed_fetch_falls_back_to_cache(snapshot):
    """Test that the last cached snapshot is used when the site rejects the session."""
    service = make_service(cached=snapshot, fetch_error=PageFetchError("url", status=403))

    result = await service.get_snapshot()

    assert result is snapshot
    service.cache.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_no_live_data_and_no_cache_raises():
    service = make_service(fetch_error=EulerStatsError("offline"))

    with pytest.raises(SnapshotUnavailableError):
        await service.get_snapshot()


@pytest.mark.asyncio
async def test_cache_first_when_refresh_disabled(snapshot):
    service = make_service(snapshot=snapshot, cached=snapshot)

    result = await service.get_snapshot(refresh=False)

    assert result is snapshot
    service.orchestrator.fetch_snapshot.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_cache_fetches_when_refresh_disabled(snapshot):
    service = make_service(snapshot=snapshot)

    result = await service.get_snapshot(refresh=False)

    assert result is snapshot
    service.orchestrator.fetch_snapshot.assert_awaited_once()


@pytest.mark.asyncio
async def test_render_returns_refresh_hint_without_data():
    service = make_service(fetch_error=PageFetchError("url", status=302))

    html = await service.render()

    assert REFRESH_HINT in html
    assert 'class="euler-stats-error"' in html


@pytest.mark.asyncio
async def test_render_includes_personal_tasks(snapshot):
    service = make_service(snapshot=snapshot)

    html = await service.render("Finish set; 40\nReview; 75")

    assert html.startswith('<div class="euler-stats">')
    assert html.index("Finish set") < html.index("Review") < html.index("Level 3: 13 problems")
    assert "Most unresolved award: " in html


@pytest.mark.asyncio
async def test_render_uses_cached_snapshot_after_failed_fetch(snapshot):
    service = make_service(cached=snapshot, fetch_error=PageFetchError("url", status=500))

    html = await service.render()

    assert "EulerFan" in html
    assert REFRESH_HINT not in html


@pytest.mark.asyncio
async def test_render_compact_override(snapshot):
    service = make_service(snapshot=snapshot)

    compact = await service.render(compact=True)
    full = await service.render()

    assert compact.startswith('<div class="euler-stats-compact">')
    assert full.startswith('<div class="euler-stats">')


@pytest.mark.asyncio
async def test_render_default_mode_comes_from_service(snapshot):
    service = make_service(snapshot=snapshot, compact=True)

    html = await service.render()

    assert html.startswith('<div class="euler-stats-compact">')


@pytest.mark.asyncio
async def test_render_never_raises_on_unexpected_error():
    service = make_service(fetch_error=RuntimeError("bad state"))

    html = await service.render()

    assert "Error fetching progress: bad state." in html


@pytest.mark.asyncio
async def test_sync_reports_outcome(snapshot):
    assert await make_service(snapshot=snapshot).sync() is True
    assert await make_service(fetch_error=PageFetchError("url", status=403)).sync() is False


@pytest.mark.asyncio
async def test_clear_cache_delegates():
    service = make_service()

    assert await service.clear_cache() is True
    service.cache.clear.assert_awaited_once()
