"""Data transfer objects for the use-case boundary."""

from media_catalog.application.dtos.category import (
    CategoryOutput,
    CreateCategoryInput,
)
from media_catalog.application.dtos.video import (
    CreateVideoInput,
    FileInput,
    ListVideosInput,
    ListVideosOutput,
    RelatedAggregateOutput,
    UpdateVideoInput,
    UploadMediasInput,
    VideoOutput,
)

__all__ = [
    "CategoryOutput",
    "CreateCategoryInput",
    "CreateVideoInput",
    "FileInput",
    "ListVideosInput",
    "ListVideosOutput",
    "RelatedAggregateOutput",
    "UpdateVideoInput",
    "UploadMediasInput",
    "VideoOutput",
]
