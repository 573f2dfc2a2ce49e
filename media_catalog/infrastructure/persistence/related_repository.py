"""Existence checks for categories, genres and cast members."""

from collections.abc import Mapping

from media_catalog.commons.infrastructure.documentdb.base import DocumentDBBase
from media_catalog.commons.telemetry import get_logger
from media_catalog.domain.repositories import (
    RelatedAggregateRepositoryBase,
    RelationKind,
)


class DocumentRelatedAggregateRepository(RelatedAggregateRepositoryBase):
    """Looks up related aggregate ids, one collection per relation kind."""

    def __init__(
        self,
        document_db: DocumentDBBase,
        collections: Mapping[RelationKind, str],
    ) -> None:
        """Initialize the repository.

        Args:
            document_db: Document database provider.
            collections: Collection name for every relation kind.
        """
        self._db = document_db
        self._collections = dict(collections)
        self._logger = get_logger(__name__)

    async def resolve_ids(self, kind: RelationKind, ids: list[str]) -> list[str]:
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            return []

        docs = await self._db.find(
            self._collections[kind],
            {"_id": {"$in": unique_ids}},
            limit=len(unique_ids),
        )
        found = [doc["id"] for doc in docs]
        self._logger.debug(
            "Resolved related ids",
            extra={
                "kind": kind.value,
                "requested": len(unique_ids),
                "found": len(found),
            },
        )
        return found
