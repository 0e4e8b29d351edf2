"""Single-file JSON cache for the last complete snapshot."""

import json
from typing import Optional

from loguru import logger

from domain.models import CacheData
from infrastructure.storage import BlobStorageProtocol

DEFAULT_FOLDER = ".euler-stats"
DEFAULT_FILE = "cache.json"


class SnapshotCache:
    """
    Persists one snapshot as a JSON blob.

    Every save replaces the blob wholesale. Read, parse and write failures are
    logged and reported as absence, never raised.
    """

    def __init__(
        self,
        storage: BlobStorageProtocol,
        folder: str = DEFAULT_FOLDER,
        file_name: str = DEFAULT_FILE,
    ):
        self.storage = storage
        self.folder = folder
        self.path = f"{folder}/{file_name}"

    async def load(self) -> Optional[CacheData]:
        """
        Load the cached snapshot.

        Returns:
            The snapshot, or None if the blob is missing or unreadable
        """
        try:
            raw = await self.storage.read_blob(self.path)
            if raw is None:
                logger.debug(f"No cached snapshot at {self.path}")
                return None
            return CacheData.from_dict(json.loads(raw))
        except Exception as e:
            logger.warning(f"Failed to load cached snapshot from {self.path}: {e}")
            return None

    async def save(self, snapshot: CacheData) -> bool:
        """Replace the cached snapshot, returning whether the write succeeded."""
        try:
            await self.storage.ensure_folder(self.folder)
            await self.storage.write_blob(self.path, json.dumps(snapshot.to_dict(), indent=2))
            logger.debug(f"Saved snapshot to {self.path}")
            return True
        except Exception as e:
            logger.warning(f"Failed to save snapshot to {self.path}: {e}")
            return False

    async def clear(self) -> bool:
        try:
            removed = await self.storage.remove_blob(self.path)
        except Exception as e:
            logger.warning(f"Failed to clear cache at {self.path}: {e}")
            return False

        if removed:
            logger.info("Cache cleared")
        else:
            logger.warning("Cache is empty")
        return removed
