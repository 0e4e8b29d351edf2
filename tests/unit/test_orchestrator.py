"""Unit tests for the fetch task graph."""

import asyncio

import pytest
from unittest.mock import AsyncMock

from application.orchestrator import AsyncStatsOrchestrator
from infrastructure.errors import EulerStatsError, PageFetchError
from infrastructure.parsers import EulerURLs

COOKIES = "PHPSESSID=abc; keep_alive=def"

PAGES = {
    EulerURLs.ACCOUNT: "account.html",
    EulerURLs.PROGRESS: "progress.html",
    EulerURLs.EULERIANS: "eulerians.html",
    EulerURLs.LEVELS: "levels.html",
    EulerURLs.FRIENDS: "friends.html",
    EulerURLs.MY_AWARDS: "my_awards.html",
    EulerURLs.AWARDS: "awards.html",
    "https://projecteuler.net/location=Russia": "location_rating.html",
    "https://projecteuler.net/language=Python": "language_rating.html",
}

PROFILE_URLS = {
    EulerURLs.ACCOUNT,
    EulerURLs.PROGRESS,
    EulerURLs.EULERIANS,
    EulerURLs.LEVELS,
    EulerURLs.FRIENDS,
}


def make_fetcher(load_page, failing_url=None, error=None):
    """Page fetcher serving stored fixtures and recording the request order."""
    fetcher = AsyncMock()
    fetcher.requested = []

    async def get_text(url, cookies):
        fetcher.requested.append(url)
        if url == failing_url:
            raise error
        return load_page(PAGES[url])

    fetcher.get_text.side_effect = get_text
    return fetcher


@pytest.mark.asyncio
async def test_fetch_snapshot_parses_every_page(html, snapshot):
    """Test that a full cycle produces the snapshot described by the fixtures."""
    fetcher = make_fetcher(html)
    orchestrator = AsyncStatsOrchestrator(fetcher, COOKIES)

    result = await orchestrator.fetch_snapshot()

    assert result == snapshot
    assert sorted(fetcher.requested) == sorted(PAGES)


@pytest.mark.asyncio
async def test_every_request_carries_the_session_cookies(html):
    fetcher = make_fetcher(html)

    await AsyncStatsOrchestrator(fetcher, COOKIES).fetch_snapshot()

    assert fetcher.get_text.await_count == len(PAGES)
    assert all(call.args[1] == COOKIES for call in fetcher.get_text.await_args_list)


@pytest.mark.asyncio
async def test_ratings_are_fetched_after_profile_pages(html):
    """Test that leaderboard URLs are only requested once the account is known."""
    fetcher = make_fetcher(html)

    await AsyncStatsOrchestrator(fetcher, COOKIES).fetch_snapshot()

    first_stage = fetcher.requested[: len(PROFILE_URLS)]
    assert set(first_stage) == PROFILE_URLS
    assert fetcher.requested.index("https://projecteuler.net/location=Russia") >= len(PROFILE_URLS)
    assert fetcher.requested.index("https://projecteuler.net/language=Python") >= len(PROFILE_URLS)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "failing_url",
    [EulerURLs.ACCOUNT, EulerURLs.FRIENDS, EulerURLs.AWARDS, "https://projecteuler.net/language=Python"],
)
async def test_fetch_error_propagates(html, failing_url):
    """Test that any failing page aborts the whole cycle."""
    error = PageFetchError(failing_url, status=403)
    fetcher = make_fetcher(html, failing_url, error)

    with pytest.raises(PageFetchError) as exc_info:
        await AsyncStatsOrchestrator(fetcher, COOKIES).fetch_snapshot()

    assert exc_info.value is error
    assert "Please refresh cookies!" in str(exc_info.value)


@pytest.mark.asyncio
async def test_unexpected_error_is_wrapped(html):
    fetcher = make_fetcher(html, EulerURLs.LEVELS, ValueError("boom"))

    with pytest.raises(EulerStatsError) as exc_info:
        await AsyncStatsOrchestrator(fetcher, COOKIES).fetch_snapshot()

    assert "boom" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_fetch_rating_pages_uses_account_location_and_language(html, snapshot):
    fetcher = make_fetcher(html)

    ratings = await AsyncStatsOrchestrator(fetcher, COOKIES).fetch_rating_pages(
        snapshot.account_data
    )

    assert ratings.location_url == "https://projecteuler.net/location=Russia"
    assert ratings.location_rating == snapshot.location_rating
    assert ratings.language_rating == snapshot.language_rating


@pytest.mark.asyncio
async def test_failure_cancels_requests_in_flight(html):
    """Test that a failing page stops sibling requests instead of leaving them running."""
    cancelled = []
    fetcher = AsyncMock()

    async def get_text(url, cookies):
        if url == EulerURLs.ACCOUNT:
            raise PageFetchError(url, status=403)
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            cancelled.append(url)
            raise
        return html(PAGES[url])

    fetcher.get_text.side_effect = get_text

    with pytest.raises(PageFetchError):
        await asyncio.wait_for(AsyncStatsOrchestrator(fetcher, COOKIES).fetch_snapshot(), timeout=5)

    assert set(cancelled) == PROFILE_URLS - {EulerURLs.ACCOUNT}
