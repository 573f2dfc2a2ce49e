"""Create-video orchestration."""

import asyncio
from collections.abc import Callable
from datetime import datetime

from media_catalog.application.common.compensation import StorageCompensation
from media_catalog.application.common.relations import ensure_related_ids_exist
from media_catalog.application.common.storage_file_name import (
    FileSlot,
    storage_file_name,
)
from media_catalog.application.dtos.video import (
    CreateVideoInput,
    FileInput,
    VideoOutput,
)
from media_catalog.application.interfaces import StorageServiceBase, UnitOfWorkBase
from media_catalog.commons.telemetry import LogContext, get_logger
from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.models.video import Video, new_id, utc_now
from media_catalog.domain.repositories import (
    RelatedAggregateRepositoryBase,
    RelationKind,
    VideoRepositoryBase,
)
from media_catalog.domain.validation.handler import NotificationValidationHandler

VALIDATION_ERRORS_MESSAGE = "There are validation errors."


class CreateVideoService:
    """Creates a video together with its relations and files.

    Sequence:
    1. Build the aggregate and collect every validation error
    2. Check that all referenced categories, genres and cast members exist
    3. Upload thumb, banner, half thumb, media and trailer, in that order
    4. Insert the aggregate and commit

    Files are uploaded before the record is written, so a committed video
    never points at a missing file. If anything fails from step 3 on, every
    file the aggregate references is deleted again, the staged insert is
    discarded and the original error propagates.
    """

    def __init__(  # noqa: PLR0913
        self,
        video_repository: VideoRepositoryBase,
        related_repository: RelatedAggregateRepositoryBase,
        storage: StorageServiceBase,
        unit_of_work: UnitOfWorkBase,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        """Initialize the service.

        Args:
            video_repository: Record store for videos.
            related_repository: Existence checker for related aggregates.
            storage: Object store for the video's files.
            unit_of_work: Commit boundary shared with ``video_repository``.
            clock: Source of creation timestamps.
            id_factory: Source of new video ids.
        """
        self._videos = video_repository
        self._related = related_repository
        self._storage = storage
        self._uow = unit_of_work
        self._clock = clock
        self._id_factory = id_factory
        self._logger = get_logger(__name__)

    async def create(self, request: CreateVideoInput) -> VideoOutput:
        """Create a video.

        Raises:
            EntityValidationException: With every violation, before any I/O.
            RelatedAggregateException: If a referenced id does not exist.
            StorageException: If an upload fails (after compensation).
            CommitException: If the commit fails (after compensation).
        """
        video = Video.create(
            request.title,
            request.description,
            request.year_launched,
            request.opened,
            request.published,
            request.duration,
            request.rating,
            clock=self._clock,
            id_factory=self._id_factory,
        )

        with LogContext(video_id=video.id):
            self._logger.info("Creating video", extra={"title": video.title})

            handler = NotificationValidationHandler()
            video.validate_with(handler)
            if handler.has_errors():
                self._logger.info(
                    "Video rejected by validation",
                    extra={"errors": [error.message for error in handler.errors]},
                )
                raise EntityValidationException(
                    VALIDATION_ERRORS_MESSAGE, handler.errors
                )

            await self._validate_and_add_relations(request, video)

            try:
                await self._upload_images(request, video)
                await self._upload_medias(request, video)
                await self._videos.insert(video)
                await self._uow.commit()
            except (Exception, asyncio.CancelledError) as e:
                self._logger.warning(
                    "Video creation failed, removing uploaded files",
                    extra={"error": repr(e)},
                )
                await self._uow.rollback()
                await self._clear_storage(video, e)
                raise

            self._logger.info(
                "Video created",
                extra={"files": len(video.stored_paths())},
            )
            return VideoOutput.from_video(video)

    async def _validate_and_add_relations(
        self, request: CreateVideoInput, video: Video
    ) -> None:
        relations = [
            (RelationKind.CATEGORY, request.categories_ids, video.add_category),
            (RelationKind.GENRE, request.genres_ids, video.add_genre),
            (RelationKind.CAST_MEMBER, request.cast_members_ids, video.add_cast_member),
        ]
        for kind, ids, _ in relations:
            if ids:
                await ensure_related_ids_exist(self._related, kind, ids)

        for _, ids, add in relations:
            for related_id in ids or []:
                add(related_id)

    async def _upload_images(self, request: CreateVideoInput, video: Video) -> None:
        if request.thumb is not None:
            video.update_thumb(await self._upload(video, FileSlot.THUMB, request.thumb))
        if request.banner is not None:
            video.update_banner(
                await self._upload(video, FileSlot.BANNER, request.banner)
            )
        if request.thumb_half is not None:
            video.update_thumb_half(
                await self._upload(video, FileSlot.THUMB_HALF, request.thumb_half)
            )

    async def _upload_medias(self, request: CreateVideoInput, video: Video) -> None:
        if request.media is not None:
            video.update_media(await self._upload(video, FileSlot.MEDIA, request.media))
        if request.trailer is not None:
            video.update_trailer(
                await self._upload(video, FileSlot.TRAILER, request.trailer)
            )

    async def _upload(self, video: Video, slot: FileSlot, file: FileInput) -> str:
        file_name = storage_file_name(video.id, slot, file.extension)
        self._logger.debug("Uploading file", extra={"file_name": file_name})
        return await self._storage.upload(file_name, file.stream, file.content_type)

    async def _clear_storage(self, video: Video, error: BaseException) -> None:
        # The aggregate starts without files, so whatever it references now
        # was uploaded by this request.
        compensation = StorageCompensation(self._storage, video.stored_paths())
        await compensation.compensate()
        compensation.attach_to(error)
