"""URL builder for Project Euler pages."""

from urllib.parse import quote

from loguru import logger

BASE_URL = "https://projecteuler.net"


class EulerURLs:
    """Fixed and derived page URLs."""

    ACCOUNT = f"{BASE_URL}/account"
    PROGRESS = f"{BASE_URL}/progress"
    EULERIANS = f"{BASE_URL}/eulerians"
    LEVELS = f"{BASE_URL}/levels"
    FRIENDS = f"{BASE_URL}/friends"
    MY_AWARDS = f"{BASE_URL}/progress;show=awards"
    AWARDS = f"{BASE_URL}/awards"

    @classmethod
    def build_location_url(cls, location: str) -> str:
        url = f"{BASE_URL}/location={quote(location)}"
        logger.debug(f"Built location URL: {url}")
        return url

    @classmethod
    def build_language_url(cls, language: str) -> str:
        url = f"{BASE_URL}/language={quote(language)}"
        logger.debug(f"Built language URL: {url}")
        return url

    @classmethod
    def build_level_url(cls, level: int) -> str:
        return f"{BASE_URL}/level={level}"

    @classmethod
    def build_member_progress_url(cls, username: str) -> str:
        return f"{BASE_URL}/progress={quote(username)}"

    @classmethod
    def build_profile_image_url(cls, account: str) -> str:
        return f"{BASE_URL}/profile/{quote(account)}.png"

    @classmethod
    def build_award_url(cls, href: str) -> str:
        return f"{BASE_URL}/{href}"
