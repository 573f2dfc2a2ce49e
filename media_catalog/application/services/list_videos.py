"""Paginated video listing."""

from media_catalog.application.dtos.video import ListVideosInput, ListVideosOutput
from media_catalog.commons.telemetry import get_logger, timed
from media_catalog.domain.repositories import VideoRepositoryBase

DEFAULT_MAX_PAGE_SIZE = 100


class ListVideosService:
    """Lists videos one page at a time."""

    def __init__(
        self,
        video_repository: VideoRepositoryBase,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        """Initialize the service.

        Args:
            video_repository: Record store for videos.
            max_page_size: Upper bound applied to the requested page size.
        """
        self._videos = video_repository
        self._max_page_size = max_page_size
        self._logger = get_logger(__name__)

    @timed
    async def list(self, request: ListVideosInput) -> ListVideosOutput:
        result = await self._videos.search(
            page=request.page,
            per_page=min(request.per_page, self._max_page_size),
            sort=request.sort,
            direction=request.direction,
        )
        self._logger.debug(
            "Videos listed",
            extra={"page": result.current_page, "count": len(result.items)},
        )
        return ListVideosOutput.from_result(result)
