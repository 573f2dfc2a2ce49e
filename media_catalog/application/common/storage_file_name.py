"""Deterministic storage keys for aggregate files."""

from enum import Enum


class FileSlot(str, Enum):
    """File-bearing slots of a Video, as they appear in storage keys."""

    THUMB = "thumb"
    BANNER = "banner"
    THUMB_HALF = "thumbhalf"
    MEDIA = "media"
    TRAILER = "trailer"


def storage_file_name(aggregate_id: str, slot: str, extension: str) -> str:
    """Build the key a file is uploaded under.

    >>> storage_file_name("42", "ThumbHalf", "png")
    '42-thumbhalf.png'
    """
    return f"{aggregate_id}-{slot.lower()}.{extension.lstrip('.')}"
