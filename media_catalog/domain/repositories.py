"""Repository ports implemented by the infrastructure layer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from media_catalog.domain.models.category import Category
from media_catalog.domain.models.video import Video


class RelationKind(str, Enum):
    """Aggregates a Video can reference by id."""

    CATEGORY = "category"
    GENRE = "genre"
    CAST_MEMBER = "cast member"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class SearchResult:
    """One page of videos."""

    current_page: int
    per_page: int
    total: int
    items: list[Video] = field(default_factory=list)


class VideoRepositoryBase(ABC):
    """Record store for Video aggregates.

    Writes are staged and only become durable when the unit of work the
    repository was built with commits.
    """

    @abstractmethod
    async def get_by_id(self, video_id: str) -> Video:
        """Load a video.

        Raises:
            NotFoundException: If no video has this id.
        """

    @abstractmethod
    async def insert(self, video: Video) -> None:
        """Stage a new video for insertion."""

    @abstractmethod
    async def update(self, video: Video) -> None:
        """Stage the current state of an existing video."""

    @abstractmethod
    async def delete(self, video: Video) -> None:
        """Stage the removal of a video."""

    @abstractmethod
    async def search(
        self,
        page: int = 1,
        per_page: int = 15,
        sort: str = "created_at",
        direction: SortDirection = SortDirection.DESC,
    ) -> SearchResult:
        """List one page of videos in the given order."""


class RelatedAggregateRepositoryBase(ABC):
    """Resolves which referenced ids actually exist."""

    @abstractmethod
    async def resolve_ids(self, kind: RelationKind, ids: list[str]) -> list[str]:
        """Return the subset of ``ids`` that exist for ``kind``.

        Missing ids are signalled by their absence from the result, never by
        an exception.
        """


class CategoryRepositoryBase(ABC):
    """Record store for Category entities."""

    @abstractmethod
    async def insert(self, category: Category) -> None:
        """Stage a new category for insertion."""
