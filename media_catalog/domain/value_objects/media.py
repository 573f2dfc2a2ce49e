"""Image and Media value objects owned by the Video aggregate."""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from media_catalog.domain.exceptions import EntityValidationException


class MediaStatus(str, Enum):
    """Encoding status of a stored media file."""

    PENDING = "pending"  # Uploaded, not yet sent to the encoder
    PROCESSING = "processing"  # Sent to the encoder
    COMPLETED = "completed"  # Encoded copy available at encoded_path
    ERROR = "error"  # Encoder reported a failure


class Image(BaseModel):
    """Location of a stored artwork file (thumb, banner, half thumb)."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1, description="Storage locator of the image")


class Media(BaseModel):
    """A stored media file plus its encoding state.

    Instances are never mutated: every transition returns a new Media that
    replaces the previous one in its slot.

    Transitions:
        pending -> processing -> completed
        processing -> error
        error -> processing (re-sent to the encoder)
        pending -> completed (encoded without going through the queue)
    """

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(min_length=1, description="Storage locator of the raw file")
    encoded_path: str | None = Field(
        default=None,
        description="Storage locator of the encoded file, once encoding completed",
    )
    status: MediaStatus = Field(
        default=MediaStatus.PENDING,
        description="Current encoding status",
    )

    @property
    def is_encoded(self) -> bool:
        return self.status == MediaStatus.COMPLETED

    def sent_to_encode(self) -> Self:
        """Return a copy marked as being processed by the encoder.

        Raises:
            EntityValidationException: If the media was already encoded.
        """
        if self.is_encoded:
            raise EntityValidationException("Media is already encoded.")
        return self.model_copy(update={"status": MediaStatus.PROCESSING})

    def encoded(self, encoded_path: str) -> Self:
        """Return a copy marked as encoded at ``encoded_path``.

        Raises:
            EntityValidationException: If the path is empty or the media is
                not waiting on the encoder.
        """
        if not encoded_path or not encoded_path.strip():
            raise EntityValidationException("EncodedPath should not be empty or null.")
        if self.status not in (MediaStatus.PENDING, MediaStatus.PROCESSING):
            raise EntityValidationException(
                f"Media cannot be marked as encoded from status '{self.status.value}'."
            )
        return self.model_copy(
            update={"encoded_path": encoded_path, "status": MediaStatus.COMPLETED}
        )

    def encoding_failed(self) -> Self:
        """Return a copy marked as failed by the encoder.

        Raises:
            EntityValidationException: If the media is not being processed.
        """
        if self.status != MediaStatus.PROCESSING:
            raise EntityValidationException(
                f"Media cannot fail encoding from status '{self.status.value}'."
            )
        return self.model_copy(update={"status": MediaStatus.ERROR})
