"""Object store adapters."""

from media_catalog.infrastructure.storage.blob_storage_service import (
    BlobStorageService,
    guess_content_type,
)

__all__ = [
    "BlobStorageService",
    "guess_content_type",
]
