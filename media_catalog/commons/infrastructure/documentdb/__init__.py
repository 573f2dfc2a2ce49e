"""Document database abstractions and implementations."""

from media_catalog.commons.infrastructure.documentdb.base import DocumentDBBase
from media_catalog.commons.infrastructure.documentdb.mongodb_provider import (
    MongoDBDocumentDB,
)

__all__ = [
    # Base classes
    "DocumentDBBase",
    # Implementations
    "MongoDBDocumentDB",
]
