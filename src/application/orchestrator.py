"""Async orchestrator for one fetch cycle over all statistics pages."""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable

from loguru import logger

from domain.models import (
    AccountData,
    AwardBlockData,
    CacheData,
    FriendData,
    LevelData,
    ProgressData,
    RatingData,
)
from infrastructure.errors import EulerStatsError
from infrastructure.parsers import (
    EulerURLs,
    PageFetcherProtocol,
    parse_account_data,
    parse_awards_data,
    parse_eulerians_data,
    parse_friends,
    parse_level_data,
    parse_progress_data,
    parse_rating_data,
)


async def _gather_or_cancel(*coros: Awaitable[Any]) -> list[Any]:
    """Run ``coros`` concurrently; the first failure cancels the rest before propagating."""
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


@dataclass(frozen=True)
class ProfilePages:
    """Records from the pages that need nothing but the session."""

    account_data: AccountData
    progress_data: ProgressData
    eulerians_place: str
    level_data: list[LevelData]
    friends: list[FriendData]


@dataclass(frozen=True)
class RatingPages:
    """Leaderboards derived from the account's location and language."""

    location_url: str
    language_url: str
    location_rating: RatingData
    language_rating: RatingData


class AsyncStatsOrchestrator:
    """
    Runs the fetch task graph.

    Stage 1 fetches the independent pages. Stage 2 fetches the location and
    language leaderboards, whose URLs come from the account page, together
    with the two award pages, which do not depend on anything. A failed page
    cancels the requests still in flight.
    """

    def __init__(self, http_client: PageFetcherProtocol, cookies: str):
        """
        Initialize orchestrator with dependency injection.

        Args:
            http_client: Async page fetcher
            cookies: Cookie header sent with every request
        """
        self.http_client = http_client
        self.cookies = cookies

    async def fetch_snapshot(self) -> CacheData:
        """
        Fetch and parse every page into a snapshot.

        Raises:
            EulerStatsError: If any page fails; nothing partial is returned
        """
        logger.info("Fetching Project Euler statistics")

        try:
            logger.info("Step 1: Fetching profile pages")
            profile = await self.fetch_profile_pages()

            logger.info("Step 2: Fetching ratings and awards")
            ratings, awards = await _gather_or_cancel(
                self.fetch_rating_pages(profile.account_data),
                self.fetch_awards(),
            )

        except EulerStatsError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error in orchestrator: {e}")
            raise EulerStatsError(f"Failed to fetch statistics: {e}") from e

        snapshot = CacheData(
            account_data=profile.account_data,
            progress_data=profile.progress_data,
            eulerians_place=profile.eulerians_place,
            location_url=ratings.location_url,
            language_url=ratings.language_url,
            location_rating=ratings.location_rating,
            language_rating=ratings.language_rating,
            level_data=tuple(profile.level_data),
            awards_data=tuple(awards),
            friends=tuple(profile.friends),
        )

        logger.info("Statistics fetched successfully")
        return snapshot

    async def fetch_profile_pages(self) -> ProfilePages:
        account_html, progress_html, eulerians_html, levels_html, friends_html = (
            await _gather_or_cancel(
                self._get(EulerURLs.ACCOUNT),
                self._get(EulerURLs.PROGRESS),
                self._get(EulerURLs.EULERIANS),
                self._get(EulerURLs.LEVELS),
                self._get(EulerURLs.FRIENDS),
            )
        )

        return ProfilePages(
            account_data=parse_account_data(account_html),
            progress_data=parse_progress_data(progress_html),
            eulerians_place=parse_eulerians_data(eulerians_html),
            level_data=parse_level_data(levels_html),
            friends=parse_friends(friends_html),
        )

    async def fetch_rating_pages(self, account_data: AccountData) -> RatingPages:
        """Fetch the leaderboards of the account's location and language."""
        location_url = EulerURLs.build_location_url(account_data.location)
        language_url = EulerURLs.build_language_url(account_data.language)

        location_html, language_html = await _gather_or_cancel(
            self._get(location_url),
            self._get(language_url),
        )

        return RatingPages(
            location_url=location_url,
            language_url=language_url,
            location_rating=parse_rating_data(location_html),
            language_rating=parse_rating_data(language_html),
        )

    async def fetch_awards(self) -> list[AwardBlockData]:
        my_awards_html, awards_html = await _gather_or_cancel(
            self._get(EulerURLs.MY_AWARDS),
            self._get(EulerURLs.AWARDS),
        )
        return parse_awards_data(my_awards_html, awards_html)

    async def _get(self, url: str) -> str:
        return await self.http_client.get_text(url, self.cookies)
