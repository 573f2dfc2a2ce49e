"""Media upload orchestration for an existing video."""

import asyncio

from media_catalog.application.common.compensation import StorageCompensation
from media_catalog.application.common.storage_file_name import (
    FileSlot,
    storage_file_name,
)
from media_catalog.application.dtos.video import (
    FileInput,
    UploadMediasInput,
    VideoOutput,
)
from media_catalog.application.interfaces import StorageServiceBase, UnitOfWorkBase
from media_catalog.commons.telemetry import LogContext, get_logger
from media_catalog.domain.models.video import Video
from media_catalog.domain.repositories import VideoRepositoryBase
from media_catalog.domain.value_objects import Media


class UploadMediasService:
    """Attaches a new media file and/or trailer to an existing video.

    Unlike creation, the video may already own files from earlier calls.
    Only the files uploaded by this call are deleted when it fails. A file
    whose key matches the one the video already references overwrites that
    object in place and is left alone on failure.
    """

    def __init__(
        self,
        video_repository: VideoRepositoryBase,
        storage: StorageServiceBase,
        unit_of_work: UnitOfWorkBase,
    ) -> None:
        self._videos = video_repository
        self._storage = storage
        self._uow = unit_of_work
        self._logger = get_logger(__name__)

    async def upload(self, request: UploadMediasInput) -> VideoOutput:
        """Upload the given files and persist the new locators.

        Raises:
            NotFoundException: If the video does not exist.
            StorageException: If an upload fails (after compensation).
            CommitException: If the commit fails (after compensation).
        """
        with LogContext(video_id=request.video_id):
            video = await self._videos.get_by_id(request.video_id)
            compensation = StorageCompensation(self._storage)

            try:
                if request.video_file is not None:
                    path = await self._upload(
                        video, FileSlot.MEDIA, request.video_file, video.media
                    )
                    self._track(compensation, path, video.media)
                    video.update_media(path)

                if request.trailer_file is not None:
                    path = await self._upload(
                        video, FileSlot.TRAILER, request.trailer_file, video.trailer
                    )
                    self._track(compensation, path, video.trailer)
                    video.update_trailer(path)

                await self._videos.update(video)
                await self._uow.commit()
            except (Exception, asyncio.CancelledError) as e:
                self._logger.warning(
                    "Media upload failed, removing files uploaded by this request",
                    extra={"uploaded": len(compensation.paths), "error": repr(e)},
                )
                await self._uow.rollback()
                await compensation.compensate()
                compensation.attach_to(e)
                raise

            self._logger.info(
                "Medias uploaded",
                extra={"uploaded": len(compensation.paths)},
            )
            return VideoOutput.from_video(video)

    async def _upload(
        self,
        video: Video,
        slot: FileSlot,
        file: FileInput,
        current: Media | None,
    ) -> str:
        file_name = storage_file_name(video.id, slot, file.extension)
        if current is not None and current.file_path == file_name:
            self._logger.info(
                "Overwriting stored file in place",
                extra={"file_name": file_name},
            )
        else:
            self._logger.debug("Uploading file", extra={"file_name": file_name})
        return await self._storage.upload(file_name, file.stream, file.content_type)

    @staticmethod
    def _track(
        compensation: StorageCompensation, path: str, current: Media | None
    ) -> None:
        # The stored record still points at an overwritten key
        if current is None or current.file_path != path:
            compensation.record(path)
