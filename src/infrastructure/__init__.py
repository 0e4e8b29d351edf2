from .errors import EulerStatsError, PageFetchError, SnapshotUnavailableError
from .storage import BlobStorageProtocol, LocalBlobStorage

__all__ = [
    "BlobStorageProtocol",
    "EulerStatsError",
    "LocalBlobStorage",
    "PageFetchError",
    "SnapshotUnavailableError",
]
