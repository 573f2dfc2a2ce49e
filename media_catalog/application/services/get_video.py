"""Single video lookup."""

from media_catalog.application.dtos.video import VideoOutput
from media_catalog.domain.repositories import VideoRepositoryBase


class GetVideoService:
    """Loads one video by id."""

    def __init__(self, video_repository: VideoRepositoryBase) -> None:
        self._videos = video_repository

    async def get(self, video_id: str) -> VideoOutput:
        """Raises NotFoundException if the video does not exist."""
        video = await self._videos.get_by_id(video_id)
        return VideoOutput.from_video(video)
