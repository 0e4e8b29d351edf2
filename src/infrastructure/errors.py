"""Exceptions raised by the infrastructure layer."""

from typing import Optional


class EulerStatsError(Exception):
    """Base error for the stats pipeline."""

    pass


class PageFetchError(EulerStatsError):
    """A page could not be fetched: non-200 status or a transport failure."""

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason

        message = f"HTTP error! GET {url} status: {status if status is not None else 'n/a'}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(f"{message}. Please refresh cookies!")


class SnapshotUnavailableError(EulerStatsError):
    """Neither a live fetch nor the cache produced a snapshot."""

    def __init__(self, message: str = "No statistics available. Please refresh your cookies!"):
        super().__init__(message)
