"""Video aggregate root."""

from collections.abc import Callable
from datetime import UTC, datetime
from enum import Enum
from typing import Self
from uuid import uuid4

from pydantic import BaseModel, Field

from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.validation.handler import ValidationHandler
from media_catalog.domain.validation.video_validator import VideoValidator
from media_catalog.domain.value_objects.media import Image, Media

MEDIA_REQUIRED_MESSAGE = "Media should not be null."


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid4())


class Rating(str, Enum):
    """Censorship rating, from least to most restrictive."""

    ER = "ER"  # Especially recommended
    L = "L"  # General audiences
    RATE_10 = "10"
    RATE_12 = "12"
    RATE_14 = "14"
    RATE_16 = "16"
    RATE_18 = "18"


class Video(BaseModel):
    """Aggregate root for a catalogued video.

    Owns its artwork (Image) and media (Media) value objects and keeps the
    ids of related categories, genres and cast members. Relation lists are
    ordered and allow the same id more than once.

    Mutations are plain in-memory state transitions; persistence and file
    storage are orchestrated by the application services.
    """

    id: str = Field(frozen=True, description="Aggregate identifier")
    title: str = Field(description="Video title (1-255 characters)")
    description: str = Field(description="Synopsis (1-4000 characters)")
    year_launched: int = Field(description="Launch year")
    opened: bool = Field(description="Whether the video is open to everyone")
    published: bool = Field(description="Whether the video is published")
    duration: int = Field(description="Duration, unit chosen by the caller")
    rating: Rating = Field(description="Censorship rating")
    created_at: datetime = Field(frozen=True, description="Creation timestamp")

    thumb: Image | None = None
    thumb_half: Image | None = None
    banner: Image | None = None
    media: Media | None = None
    trailer: Media | None = None

    categories: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    cast_members: list[str] = Field(default_factory=list)

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        title: str,
        description: str,
        year_launched: int,
        opened: bool,
        published: bool,
        duration: int,
        rating: Rating,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> Self:
        """Create a new Video with empty relations and no files.

        Args:
            clock: Source of the creation timestamp.
            id_factory: Source of the aggregate identifier.
        """
        return cls(
            id=id_factory(),
            title=title,
            description=description,
            year_launched=year_launched,
            opened=opened,
            published=published,
            duration=duration,
            rating=rating,
            created_at=clock(),
        )

    def validate_with(self, handler: ValidationHandler) -> None:
        """Push every violation of this aggregate into ``handler``."""
        VideoValidator(self, handler).validate()

    def update(  # noqa: PLR0913
        self,
        title: str,
        description: str,
        year_launched: int,
        opened: bool,
        published: bool,
        duration: int,
        rating: Rating | None = None,
    ) -> None:
        """Replace the scalar fields, keeping the rating when none is given."""
        self.title = title
        self.description = description
        self.year_launched = year_launched
        self.opened = opened
        self.published = published
        self.duration = duration
        if rating is not None:
            self.rating = rating

    # ---- Relations -------------------------------------------------------

    def add_category(self, category_id: str) -> None:
        self.categories.append(category_id)

    def remove_category(self, category_id: str) -> None:
        _remove_first(self.categories, category_id)

    def remove_all_categories(self) -> None:
        self.categories.clear()

    def add_genre(self, genre_id: str) -> None:
        self.genres.append(genre_id)

    def remove_genre(self, genre_id: str) -> None:
        _remove_first(self.genres, genre_id)

    def remove_all_genres(self) -> None:
        self.genres.clear()

    def add_cast_member(self, cast_member_id: str) -> None:
        self.cast_members.append(cast_member_id)

    def remove_cast_member(self, cast_member_id: str) -> None:
        _remove_first(self.cast_members, cast_member_id)

    def remove_all_cast_members(self) -> None:
        self.cast_members.clear()

    # ---- Files -----------------------------------------------------------

    def update_thumb(self, path: str) -> None:
        self.thumb = Image(path=path)

    def update_thumb_half(self, path: str) -> None:
        self.thumb_half = Image(path=path)

    def update_banner(self, path: str) -> None:
        self.banner = Image(path=path)

    def update_media(self, path: str) -> None:
        """Attach a new media file; any previous encoding state is dropped."""
        self.media = Media(file_path=path)

    def update_trailer(self, path: str) -> None:
        self.trailer = Media(file_path=path)

    def stored_paths(self) -> list[str]:
        """Locators of every file currently referenced by this video."""
        images = [self.thumb, self.thumb_half, self.banner]
        medias = [self.media, self.trailer]
        return [image.path for image in images if image is not None] + [
            media.file_path for media in medias if media is not None
        ]

    # ---- Encoding --------------------------------------------------------

    def update_as_sent_to_encode(self) -> None:
        self.media = self._require_media().sent_to_encode()

    def update_as_encoded(self, encoded_path: str) -> None:
        self.media = self._require_media().encoded(encoded_path)

    def update_as_encoding_error(self) -> None:
        self.media = self._require_media().encoding_failed()

    def _require_media(self) -> Media:
        if self.media is None:
            raise EntityValidationException(MEDIA_REQUIRED_MESSAGE)
        return self.media


def _remove_first(ids: list[str], target: str) -> None:
    if target in ids:
        ids.remove(target)
