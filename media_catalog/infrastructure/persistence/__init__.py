"""Record store adapters."""

from media_catalog.infrastructure.persistence.category_repository import (
    DocumentCategoryRepository,
)
from media_catalog.infrastructure.persistence.related_repository import (
    DocumentRelatedAggregateRepository,
)
from media_catalog.infrastructure.persistence.unit_of_work import (
    DocumentUnitOfWork,
    OperationKind,
    PendingOperation,
)
from media_catalog.infrastructure.persistence.video_repository import (
    DocumentVideoRepository,
)

__all__ = [
    "DocumentCategoryRepository",
    "DocumentRelatedAggregateRepository",
    "DocumentUnitOfWork",
    "DocumentVideoRepository",
    "OperationKind",
    "PendingOperation",
]
