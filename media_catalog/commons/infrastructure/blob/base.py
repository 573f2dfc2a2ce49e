"""Abstract base class for blob storage operations."""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

BlobData = io.IOBase | bytes


@dataclass
class BlobMetadata:
    """Metadata for a stored blob."""

    path: str
    size_bytes: int
    content_type: str
    created_at: datetime
    etag: str


@dataclass
class HealthStatus:
    """Health check result."""

    healthy: bool
    latency_ms: float
    message: str | None = None
    details: dict[str, str] | None = None


class BlobNotFoundError(Exception):
    """Raised when a blob is not found."""

    def __init__(self, bucket: str, path: str) -> None:
        self.bucket = bucket
        self.path = path
        super().__init__(f"Blob not found: {bucket}/{path}")


class BlobStorageBase(ABC):
    """Bucket/key object store used for video files and images."""

    @abstractmethod
    async def upload(
        self,
        bucket: str,
        path: str,
        data: BlobData,
        content_type: str = "application/octet-stream",
    ) -> BlobMetadata:
        """Upload a blob, replacing any blob already stored at ``path``.

        Args:
            bucket: Target bucket name.
            path: Object key within the bucket.
            data: Readable binary stream or bytes.
            content_type: MIME type of the content.

        Returns:
            Metadata of the uploaded blob.
        """

    @abstractmethod
    async def delete(self, bucket: str, path: str) -> bool:
        """Delete a blob.

        Returns:
            True if deleted, False if it did not exist.
        """

    @abstractmethod
    async def exists(self, bucket: str, path: str) -> bool:
        """Check if a blob exists."""

    @abstractmethod
    async def get_metadata(self, bucket: str, path: str) -> BlobMetadata:
        """Get blob metadata without downloading.

        Raises:
            BlobNotFoundError: If the blob does not exist.
        """

    @abstractmethod
    async def create_bucket(self, bucket: str) -> bool:
        """Create a bucket.

        Returns:
            True if created, False if it already existed.
        """

    @abstractmethod
    async def bucket_exists(self, bucket: str) -> bool:
        """Check if a bucket exists."""

    @abstractmethod
    async def health_check(self) -> HealthStatus:
        """Check service health."""
