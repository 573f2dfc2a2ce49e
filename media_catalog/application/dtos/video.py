"""DTOs for video catalog use cases."""

import io
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from media_catalog.domain.models.video import Rating, Video
from media_catalog.domain.repositories import SearchResult, SortDirection


class FileInput(BaseModel):
    """A file sent along with a request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    extension: str = Field(min_length=1, description="File extension, e.g. 'mp4'")
    stream: io.IOBase | bytes = Field(
        description="Readable binary stream or raw bytes"
    )
    content_type: str | None = Field(default=None, description="MIME type, if known")


class CreateVideoInput(BaseModel):
    """Request to create a video, optionally with relations and files."""

    title: str
    description: str
    year_launched: int
    opened: bool
    published: bool
    duration: int
    rating: Rating
    categories_ids: list[str] | None = None
    genres_ids: list[str] | None = None
    cast_members_ids: list[str] | None = None
    thumb: FileInput | None = None
    banner: FileInput | None = None
    thumb_half: FileInput | None = None
    media: FileInput | None = None
    trailer: FileInput | None = None


class UpdateVideoInput(BaseModel):
    """Request to replace a video's metadata and add genres."""

    video_id: str
    title: str
    description: str
    year_launched: int
    opened: bool
    published: bool
    duration: int
    rating: Rating | None = Field(
        default=None,
        description="New rating; the current one is kept when omitted",
    )
    genres_ids: list[str] | None = None


class UploadMediasInput(BaseModel):
    """Request to attach a new media file and/or trailer to a video."""

    video_id: str
    video_file: FileInput | None = None
    trailer_file: FileInput | None = None


class RelatedAggregateOutput(BaseModel):
    """Reference to a related aggregate."""

    id: str
    name: str | None = None


class VideoOutput(BaseModel):
    """Video as returned by the use cases."""

    id: str
    title: str
    description: str
    year_launched: int
    opened: bool
    published: bool
    duration: int
    rating: str
    created_at: datetime
    categories: list[RelatedAggregateOutput] = Field(default_factory=list)
    genres: list[RelatedAggregateOutput] = Field(default_factory=list)
    cast_members: list[RelatedAggregateOutput] = Field(default_factory=list)
    thumb_file_url: str | None = None
    banner_file_url: str | None = None
    thumb_half_file_url: str | None = None
    video_file_url: str | None = None
    trailer_file_url: str | None = None

    @classmethod
    def from_video(cls, video: Video) -> "VideoOutput":
        return cls(
            id=video.id,
            title=video.title,
            description=video.description,
            year_launched=video.year_launched,
            opened=video.opened,
            published=video.published,
            duration=video.duration,
            rating=video.rating.value,
            created_at=video.created_at,
            categories=[RelatedAggregateOutput(id=i) for i in video.categories],
            genres=[RelatedAggregateOutput(id=i) for i in video.genres],
            cast_members=[RelatedAggregateOutput(id=i) for i in video.cast_members],
            thumb_file_url=video.thumb.path if video.thumb else None,
            banner_file_url=video.banner.path if video.banner else None,
            thumb_half_file_url=video.thumb_half.path if video.thumb_half else None,
            video_file_url=video.media.file_path if video.media else None,
            trailer_file_url=video.trailer.file_path if video.trailer else None,
        )


class ListVideosInput(BaseModel):
    """Pagination parameters for listing videos."""

    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=15, ge=1)
    sort: str = "created_at"
    direction: SortDirection = SortDirection.DESC


class ListVideosOutput(BaseModel):
    """One page of videos."""

    current_page: int
    per_page: int
    total: int
    items: list[VideoOutput]

    @classmethod
    def from_result(cls, result: SearchResult) -> "ListVideosOutput":
        return cls(
            current_page=result.current_page,
            per_page=result.per_page,
            total=result.total,
            items=[VideoOutput.from_video(video) for video in result.items],
        )
