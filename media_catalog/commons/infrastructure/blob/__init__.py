"""Blob storage abstractions and implementations."""

from media_catalog.commons.infrastructure.blob.base import (
    BlobData,
    BlobMetadata,
    BlobNotFoundError,
    BlobStorageBase,
    HealthStatus,
)
from media_catalog.commons.infrastructure.blob.minio_provider import MinioBlobStorage

__all__ = [
    # Base classes
    "BlobData",
    "BlobMetadata",
    "BlobStorageBase",
    "HealthStatus",
    # Implementations
    "MinioBlobStorage",
    # Exceptions
    "BlobNotFoundError",
]
