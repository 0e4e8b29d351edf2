"""Blob storage on the local filesystem."""

import asyncio
from pathlib import Path
from typing import Optional, Protocol


class BlobStorageProtocol(Protocol):
    """Protocol for reading and writing whole text blobs."""

    async def read_blob(self, path: str) -> Optional[str]:
        """Return the blob text, or None if it does not exist."""
        ...

    async def write_blob(self, path: str, text: str) -> None:
        """Replace the blob with ``text``."""
        ...

    async def ensure_folder(self, path: str) -> None:
        """Create the folder if it is missing."""
        ...

    async def remove_blob(self, path: str) -> bool:
        """Delete the blob, returning whether it existed."""
        ...


class LocalBlobStorage:
    """Stores blobs as files below a root directory."""

    def __init__(self, root: Path | str = "."):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / path

    async def read_blob(self, path: str) -> Optional[str]:
        target = self._resolve(path)
        if not await asyncio.to_thread(target.is_file):
            return None
        return await asyncio.to_thread(target.read_text, encoding="utf-8")

    async def write_blob(self, path: str, text: str) -> None:
        target = self._resolve(path)
        await asyncio.to_thread(target.write_text, text, encoding="utf-8")

    async def ensure_folder(self, path: str) -> None:
        target = self._resolve(path)
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)

    async def remove_blob(self, path: str) -> bool:
        target = self._resolve(path)
        if not await asyncio.to_thread(target.is_file):
            return False
        await asyncio.to_thread(target.unlink)
        return True
