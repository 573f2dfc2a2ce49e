"""Domain value objects."""

from media_catalog.domain.value_objects.media import Image, Media, MediaStatus

__all__ = ["Image", "Media", "MediaStatus"]
