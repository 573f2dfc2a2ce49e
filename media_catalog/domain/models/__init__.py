"""Domain models."""

from media_catalog.domain.models.category import Category
from media_catalog.domain.models.video import Rating, Video

__all__ = [
    "Category",
    "Rating",
    "Video",
]
