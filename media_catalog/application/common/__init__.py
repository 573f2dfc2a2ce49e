"""Helpers shared by the use-case services."""

from media_catalog.application.common.compensation import (
    CompensationFailure,
    StorageCompensation,
)
from media_catalog.application.common.relations import (
    ensure_related_ids_exist,
    find_missing_ids,
)
from media_catalog.application.common.storage_file_name import (
    FileSlot,
    storage_file_name,
)

__all__ = [
    "CompensationFailure",
    "FileSlot",
    "StorageCompensation",
    "ensure_related_ids_exist",
    "find_missing_ids",
    "storage_file_name",
]
