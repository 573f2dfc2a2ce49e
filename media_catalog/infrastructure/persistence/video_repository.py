"""Video repository backed by the document database."""

from media_catalog.application.exceptions import NotFoundException
from media_catalog.commons.infrastructure.documentdb.base import DocumentDBBase
from media_catalog.commons.telemetry import get_logger
from media_catalog.domain.models.video import Video
from media_catalog.domain.repositories import (
    SearchResult,
    SortDirection,
    VideoRepositoryBase,
)
from media_catalog.infrastructure.persistence.unit_of_work import DocumentUnitOfWork

SORTABLE_FIELDS = frozenset({"title", "year_launched", "created_at"})
DEFAULT_SORT_FIELD = "created_at"


class DocumentVideoRepository(VideoRepositoryBase):
    """Reads videos directly and stages writes on a ``DocumentUnitOfWork``."""

    def __init__(
        self,
        document_db: DocumentDBBase,
        unit_of_work: DocumentUnitOfWork,
        collection: str = "videos",
    ) -> None:
        """Initialize the repository.

        Args:
            document_db: Document database provider used for reads.
            unit_of_work: Unit of work that receives every write.
            collection: Collection holding video documents.
        """
        self._db = document_db
        self._uow = unit_of_work
        self._collection = collection
        self._logger = get_logger(__name__)

    async def get_by_id(self, video_id: str) -> Video:
        doc = await self._db.find_by_id(self._collection, video_id)
        if doc is None:
            self._logger.debug("Video not found", extra={"video_id": video_id})
            raise NotFoundException.for_video(video_id)
        return Video.model_validate(doc)

    async def insert(self, video: Video) -> None:
        self._uow.register_insert(self._collection, video.id, _to_document(video))

    async def update(self, video: Video) -> None:
        self._uow.register_update(self._collection, video.id, _to_document(video))

    async def delete(self, video: Video) -> None:
        self._uow.register_delete(self._collection, video.id)

    async def search(
        self,
        page: int = 1,
        per_page: int = 15,
        sort: str = DEFAULT_SORT_FIELD,
        direction: SortDirection = SortDirection.DESC,
    ) -> SearchResult:
        """List one page of videos.

        Unknown sort fields fall back to ``created_at``.
        """
        field = sort if sort in SORTABLE_FIELDS else DEFAULT_SORT_FIELD
        order = 1 if direction is SortDirection.ASC else -1
        docs = await self._db.find(
            self._collection,
            {},
            skip=(page - 1) * per_page,
            limit=per_page,
            sort=[(field, order), ("_id", order)],
        )
        total = await self._db.count(self._collection)
        return SearchResult(
            current_page=page,
            per_page=per_page,
            total=total,
            items=[Video.model_validate(doc) for doc in docs],
        )


def _to_document(video: Video) -> dict[str, object]:
    return video.model_dump(mode="json")
