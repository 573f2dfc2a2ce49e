"""Application layer - use cases and orchestration.

This layer contains:
- Services: one orchestrator per use case
- DTOs: Data transfer objects for the use-case boundary
- Interfaces: ports for the object store and the unit of work
"""

from media_catalog.application.dtos import (
    CategoryOutput,
    CreateCategoryInput,
    CreateVideoInput,
    FileInput,
    ListVideosInput,
    ListVideosOutput,
    RelatedAggregateOutput,
    UpdateVideoInput,
    UploadMediasInput,
    VideoOutput,
)
from media_catalog.application.exceptions import (
    ApplicationException,
    CommitException,
    NotFoundException,
    RelatedAggregateException,
    StorageException,
)
from media_catalog.application.interfaces import StorageServiceBase, UnitOfWorkBase
from media_catalog.application.services import (
    CreateCategoryService,
    CreateVideoService,
    DeleteVideoService,
    GetVideoService,
    ListVideosService,
    UpdateVideoService,
    UploadMediasService,
)

__all__ = [
    # DTOs
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
    # Exceptions
    "ApplicationException",
    "CommitException",
    "NotFoundException",
    "RelatedAggregateException",
    "StorageException",
    # Ports
    "StorageServiceBase",
    "UnitOfWorkBase",
    # Services
    "CreateCategoryService",
    "CreateVideoService",
    "DeleteVideoService",
    "GetVideoService",
    "ListVideosService",
    "UpdateVideoService",
    "UploadMediasService",
]
