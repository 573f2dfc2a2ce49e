"""Update-video orchestration."""

from media_catalog.application.common.relations import ensure_related_ids_exist
from media_catalog.application.dtos.video import UpdateVideoInput, VideoOutput
from media_catalog.application.interfaces import UnitOfWorkBase
from media_catalog.application.services.create_video import VALIDATION_ERRORS_MESSAGE
from media_catalog.commons.telemetry import LogContext, get_logger
from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.repositories import (
    RelatedAggregateRepositoryBase,
    RelationKind,
    VideoRepositoryBase,
)
from media_catalog.domain.validation.handler import NotificationValidationHandler


class UpdateVideoService:
    """Replaces a video's metadata and appends genres.

    Categories and cast members are not changed by this use case. No files
    are touched, so there is nothing to compensate.
    """

    def __init__(
        self,
        video_repository: VideoRepositoryBase,
        related_repository: RelatedAggregateRepositoryBase,
        unit_of_work: UnitOfWorkBase,
    ) -> None:
        self._videos = video_repository
        self._related = related_repository
        self._uow = unit_of_work
        self._logger = get_logger(__name__)

    async def update(self, request: UpdateVideoInput) -> VideoOutput:
        """Update a video.

        Raises:
            NotFoundException: If the video does not exist.
            RelatedAggregateException: If a genre id does not exist.
            EntityValidationException: With every violation; nothing is saved.
            CommitException: If the commit fails.
        """
        with LogContext(video_id=request.video_id):
            video = await self._videos.get_by_id(request.video_id)

            video.update(
                request.title,
                request.description,
                request.year_launched,
                request.opened,
                request.published,
                request.duration,
                request.rating,
            )

            if request.genres_ids:
                await ensure_related_ids_exist(
                    self._related, RelationKind.GENRE, request.genres_ids
                )
                for genre_id in request.genres_ids:
                    video.add_genre(genre_id)

            handler = NotificationValidationHandler()
            video.validate_with(handler)
            if handler.has_errors():
                raise EntityValidationException(
                    VALIDATION_ERRORS_MESSAGE, handler.errors
                )

            await self._videos.update(video)
            await self._uow.commit()

            self._logger.info(
                "Video updated",
                extra={"genres_added": len(request.genres_ids or [])},
            )
            return VideoOutput.from_video(video)
