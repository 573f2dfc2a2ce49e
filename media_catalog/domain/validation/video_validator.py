"""Validator for the Video aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from media_catalog.domain.validation.handler import ValidationError, ValidationHandler

if TYPE_CHECKING:
    from media_catalog.domain.models.video import Video

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 4000


class VideoValidator:
    """Pushes every Video violation into the given handler."""

    def __init__(self, video: Video, handler: ValidationHandler) -> None:
        self._video = video
        self._handler = handler

    def validate(self) -> None:
        self._validate_text("Title", self._video.title, TITLE_MAX_LENGTH)
        self._validate_text(
            "Description", self._video.description, DESCRIPTION_MAX_LENGTH
        )

    def _validate_text(self, field_name: str, value: str, maximum: int) -> None:
        if not value or not value.strip():
            self._handler.handle_error(
                ValidationError(
                    f"{field_name} should not be empty or null.", field_name
                )
            )
        elif len(value) > maximum:
            self._handler.handle_error(
                ValidationError(
                    f"{field_name} should be less or equal {maximum} characters long.",
                    field_name,
                )
            )
