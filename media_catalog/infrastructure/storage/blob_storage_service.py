"""Object store adapter for video files and images."""

import io
import logging
import mimetypes

from minio.error import MinioException
from urllib3.exceptions import HTTPError

from media_catalog.application.exceptions import StorageException
from media_catalog.application.interfaces import StorageServiceBase
from media_catalog.commons.infrastructure.blob.base import BlobStorageBase
from media_catalog.commons.telemetry import get_logger, log_exceptions

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Raised by the minio client for S3 errors, transport errors and bad streams
_PROVIDER_ERRORS = (MinioException, HTTPError, OSError, ValueError)


class BlobStorageService(StorageServiceBase):
    """Stores catalog files in a single bucket.

    The locator returned by ``upload`` is the object key itself.
    """

    def __init__(self, blob_storage: BlobStorageBase, bucket: str) -> None:
        """Initialize storage service.

        Args:
            blob_storage: Blob storage provider.
            bucket: Bucket holding every catalog file.
        """
        self._blob = blob_storage
        self._bucket = bucket
        self._logger = get_logger(__name__)

    @property
    def bucket(self) -> str:
        return self._bucket

    async def ensure_bucket_exists(self) -> None:
        if await self._blob.create_bucket(self._bucket):
            self._logger.info("Created bucket", extra={"bucket": self._bucket})

    @log_exceptions(message="Blob upload failed")
    async def upload(
        self,
        file_name: str,
        data: io.IOBase | bytes,
        content_type: str | None = None,
    ) -> str:
        content_type = content_type or guess_content_type(file_name)
        self._logger.debug(
            "Uploading file to blob storage",
            extra={
                "file_name": file_name,
                "bucket": self._bucket,
                "content_type": content_type,
            },
        )
        try:
            metadata = await self._blob.upload(
                self._bucket, file_name, data, content_type=content_type
            )
        except _PROVIDER_ERRORS as e:
            raise StorageException("upload", file_name, str(e)) from e

        self._logger.info(
            "File uploaded to blob storage",
            extra={"file_name": file_name, "size_bytes": metadata.size_bytes},
        )
        return file_name

    @log_exceptions(level=logging.WARNING, message="Blob delete failed")
    async def delete(self, file_path: str) -> None:
        try:
            deleted = await self._blob.delete(self._bucket, file_path)
        except _PROVIDER_ERRORS as e:
            raise StorageException("delete", file_path, str(e)) from e

        if deleted:
            self._logger.info(
                "File deleted from blob storage", extra={"file_name": file_path}
            )
        else:
            self._logger.debug(
                "File to delete was already gone", extra={"file_name": file_path}
            )


def guess_content_type(file_name: str) -> str:
    content_type, _ = mimetypes.guess_type(file_name)
    return content_type or DEFAULT_CONTENT_TYPE
