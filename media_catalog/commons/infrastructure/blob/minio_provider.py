"""MinIO implementation of blob storage."""

import asyncio
import io
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeVar

from minio import Minio
from minio.error import S3Error

from media_catalog.commons.infrastructure.blob.base import (
    BlobData,
    BlobMetadata,
    BlobNotFoundError,
    BlobStorageBase,
    HealthStatus,
)

T = TypeVar("T")

# Part size for streams whose length is unknown up front
_MULTIPART_SIZE = 10 * 1024 * 1024

_MISSING_CODES = frozenset({"NoSuchKey", "NoSuchObject"})


class MinioBlobStorage(BlobStorageBase):
    """MinIO implementation of blob storage.

    Works with both MinIO (local development) and AWS S3. The minio client
    is blocking, so every call runs in the default executor.
    """

    def __init__(
        self,
        endpoint: str,
        access_key: str,
        secret_key: str,
        secure: bool = False,
        region: str | None = None,
    ) -> None:
        self._client = Minio(
            endpoint=endpoint,
            access_key=access_key,
            secret_key=secret_key,
            secure=secure,
            region=region,
        )
        self._endpoint = endpoint

    async def _run(self, func: Callable[[], T]) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    async def upload(
        self,
        bucket: str,
        path: str,
        data: BlobData,
        content_type: str = "application/octet-stream",
    ) -> BlobMetadata:
        stream, length = _sized_stream(data)

        def _upload() -> None:
            self._client.put_object(
                bucket_name=bucket,
                object_name=path,
                data=stream,
                length=length,
                content_type=content_type,
                part_size=_MULTIPART_SIZE if length < 0 else 0,
            )

        await self._run(_upload)
        return await self.get_metadata(bucket, path)

    async def delete(self, bucket: str, path: str) -> bool:
        if not await self.exists(bucket, path):
            return False
        await self._run(lambda: self._client.remove_object(bucket, path))
        return True

    async def exists(self, bucket: str, path: str) -> bool:
        def _stat() -> bool:
            try:
                self._client.stat_object(bucket, path)
            except S3Error as e:
                if e.code in _MISSING_CODES:
                    return False
                raise
            return True

        return await self._run(_stat)

    async def get_metadata(self, bucket: str, path: str) -> BlobMetadata:
        def _stat() -> BlobMetadata:
            try:
                stat = self._client.stat_object(bucket, path)
            except S3Error as e:
                if e.code in _MISSING_CODES:
                    raise BlobNotFoundError(bucket, path) from e
                raise
            return BlobMetadata(
                path=path,
                size_bytes=stat.size or 0,
                content_type=stat.content_type or "application/octet-stream",
                created_at=stat.last_modified or datetime.now(UTC),
                etag=stat.etag or "",
            )

        return await self._run(_stat)

    async def create_bucket(self, bucket: str) -> bool:
        def _create() -> bool:
            if self._client.bucket_exists(bucket):
                return False
            self._client.make_bucket(bucket)
            return True

        return await self._run(_create)

    async def bucket_exists(self, bucket: str) -> bool:
        return await self._run(lambda: self._client.bucket_exists(bucket))

    async def health_check(self) -> HealthStatus:
        start = time.perf_counter()
        try:
            await self._run(self._client.list_buckets)
        except Exception as e:
            return HealthStatus(
                healthy=False,
                latency_ms=(time.perf_counter() - start) * 1000,
                message=f"MinIO health check failed: {e}",
                details={"endpoint": self._endpoint, "error": str(e)},
            )
        return HealthStatus(
            healthy=True,
            latency_ms=(time.perf_counter() - start) * 1000,
            message="MinIO is healthy",
            details={"endpoint": self._endpoint},
        )


def _sized_stream(data: BlobData) -> tuple[io.IOBase, int]:
    """Wrap ``data`` for ``put_object`` and work out its length.

    Returns -1 as the length for streams that cannot seek.
    """
    if isinstance(data, bytes):
        return io.BytesIO(data), len(data)
    if not data.seekable():
        return data, -1
    start = data.tell()
    length = data.seek(0, io.SEEK_END) - start
    data.seek(start)
    return data, length
