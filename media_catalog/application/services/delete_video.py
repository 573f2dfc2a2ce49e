"""Delete-video orchestration."""

import asyncio

from media_catalog.application.interfaces import StorageServiceBase, UnitOfWorkBase
from media_catalog.commons.telemetry import LogContext, get_logger
from media_catalog.domain.repositories import VideoRepositoryBase


class DeleteVideoService:
    """Deletes a video record along with its media and trailer files.

    Artwork files (thumb, banner, half thumb) are left in the object store.
    Deletion cannot be undone, so there is no compensation: if the commit
    fails after the files are gone, the failure is logged as critical and
    propagated.
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

    async def delete(self, video_id: str) -> None:
        """Delete a video.

        Raises:
            NotFoundException: If the video does not exist.
            StorageException: If a file delete fails; the staged record delete
                is rolled back.
            CommitException: If the commit fails after the files were deleted.
        """
        with LogContext(video_id=video_id):
            video = await self._videos.get_by_id(video_id)

            await self._videos.delete(video)

            deleted_files: list[str] = []
            try:
                if video.trailer is not None:
                    await self._storage.delete(video.trailer.file_path)
                    deleted_files.append(video.trailer.file_path)
                if video.media is not None:
                    await self._storage.delete(video.media.file_path)
                    deleted_files.append(video.media.file_path)
            except (Exception, asyncio.CancelledError) as e:
                self._logger.error(
                    "File delete failed, record deletion discarded",
                    extra={"deleted_files": deleted_files, "error": repr(e)},
                )
                await self._uow.rollback()
                raise

            try:
                await self._uow.commit()
            except Exception as e:
                self._logger.critical(
                    "Video files deleted but record deletion was not committed",
                    extra={"deleted_files": deleted_files, "error": repr(e)},
                )
                raise

            self._logger.info(
                "Video deleted",
                extra={"deleted_files": len(deleted_files)},
            )
