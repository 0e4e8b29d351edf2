"""Pydantic schemas for stats API endpoints."""

from pydantic import BaseModel


class StatsRequest(BaseModel):
    """Request rendering statistics for a stats block."""

    source: str = ""  # Block text, one "label; percentage" task per line
    compact: bool | None = None  # None uses the configured mode
    refresh: bool = True  # False renders from cache when one exists


class SyncResponse(BaseModel):
    """Result of a fetch-and-cache run."""

    synced: bool
