"""Unit tests for the JSON snapshot cache."""

import json
from dataclasses import replace

import pytest
from unittest.mock import AsyncMock

from infrastructure.storage import LocalBlobStorage
from services.cache import SnapshotCache


@pytest.fixture
def cache(tmp_path):
    return SnapshotCache(LocalBlobStorage(tmp_path))


@pytest.mark.asyncio
async def test_save_then_load_returns_equal_snapshot(cache, snapshot, tmp_path):
    """Test that a saved snapshot loads back unchanged."""
    assert await cache.save(snapshot) is True

    assert (tmp_path / ".euler-stats" / "cache.json").is_file()
    assert await cache.load() == snapshot


@pytest.mark.asyncio
async def test_saved_blob_is_readable_json(cache, snapshot, tmp_path):
    await cache.save(snapshot)

    data = json.loads((tmp_path / ".euler-stats" / "cache.json").read_text(encoding="utf-8"))

    assert data["account_data"]["alias"] == "EulerFan"
    assert data["location_rating"]["place"] == 37
    assert data["awards_data"][1]["awards"][0]["award"] == "Prime Obsession"


@pytest.mark.asyncio
async def test_save_replaces_previous_snapshot(cache, snapshot):
    await cache.save(snapshot)
    updated = replace(snapshot, eulerians_place="999th")

    await cache.save(updated)

    assert (await cache.load()).eulerians_place == "999th"


@pytest.mark.asyncio
async def test_load_missing_blob_returns_none(cache):
    assert await cache.load() is None


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ['{"account_data": {"alias": "Eu', "{}", "[]", "not json"])
async def test_load_unreadable_blob_returns_none(cache, tmp_path, content):
    """Test that truncated or malformed cache files are treated as absent."""
    folder = tmp_path / ".euler-stats"
    folder.mkdir()
    (folder / "cache.json").write_text(content, encoding="utf-8")

    assert await cache.load() is None


@pytest.mark.asyncio
async def test_clear_reports_whether_cache_existed(cache, snapshot):
    await cache.save(snapshot)

    assert await cache.clear() is True
    assert await cache.clear() is False
    assert await cache.load() is None


@pytest.mark.asyncio
async def test_save_failure_returns_false(snapshot):
    """Test that storage errors are reported, not raised."""
    storage = AsyncMock()
    storage.write_blob.side_effect = OSError("disk full")

    cache = SnapshotCache(storage)

    assert await cache.save(snapshot) is False
    storage.ensure_folder.assert_awaited_once_with(".euler-stats")


@pytest.mark.asyncio
async def test_load_failure_returns_none():
    storage = AsyncMock()
    storage.read_blob.side_effect = PermissionError("denied")

    assert await SnapshotCache(storage).load() is None


@pytest.mark.asyncio
async def test_custom_location(tmp_path, snapshot):
    cache = SnapshotCache(LocalBlobStorage(tmp_path), folder="state", file_name="euler.json")

    await cache.save(snapshot)

    assert (tmp_path / "state" / "euler.json").is_file()
