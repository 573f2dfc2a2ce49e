"""Relation id helpers."""

from media_catalog.application.exceptions import RelatedAggregateException
from media_catalog.domain.repositories import (
    RelatedAggregateRepositoryBase,
    RelationKind,
)


def find_missing_ids(requested: list[str], existing: list[str]) -> list[str]:
    """Ids of ``requested`` absent from ``existing``, in request order."""
    found = set(existing)
    return [item for item in requested if item not in found]


async def ensure_related_ids_exist(
    repository: RelatedAggregateRepositoryBase,
    kind: RelationKind,
    ids: list[str],
) -> None:
    """Check every id against the record store.

    Raises:
        RelatedAggregateException: Naming the ids that do not exist.
    """
    existing = await repository.resolve_ids(kind, ids)
    if len(existing) < len(ids):
        missing = find_missing_ids(ids, existing)
        if missing:
            raise RelatedAggregateException(kind, missing)
