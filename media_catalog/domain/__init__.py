"""Domain layer - aggregate, value objects, validation and ports."""

from media_catalog.domain.exceptions import DomainException, EntityValidationException
from media_catalog.domain.models import Category, Rating, Video
from media_catalog.domain.repositories import (
    CategoryRepositoryBase,
    RelatedAggregateRepositoryBase,
    RelationKind,
    SearchResult,
    SortDirection,
    VideoRepositoryBase,
)
from media_catalog.domain.validation import (
    NotificationValidationHandler,
    ValidationError,
    ValidationHandler,
)
from media_catalog.domain.value_objects import Image, Media, MediaStatus

__all__ = [
    # Exceptions
    "DomainException",
    "EntityValidationException",
    # Models
    "Video",
    "Rating",
    "Category",
    # Value objects
    "Image",
    "Media",
    "MediaStatus",
    # Validation
    "ValidationError",
    "ValidationHandler",
    "NotificationValidationHandler",
    # Ports
    "CategoryRepositoryBase",
    "VideoRepositoryBase",
    "RelatedAggregateRepositoryBase",
    "RelationKind",
    "SearchResult",
    "SortDirection",
]
