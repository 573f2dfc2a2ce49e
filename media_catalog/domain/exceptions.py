"""Domain exceptions for the media catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from media_catalog.domain.validation.handler import ValidationError


class DomainException(Exception):
    """Base exception for domain errors."""


class EntityValidationException(DomainException):
    """Raised when an entity is (or would become) invalid.

    Carries the full list of violations when the caller collected them with
    a notification handler, or none when raised by a fail-fast check.
    """

    def __init__(
        self,
        message: str,
        errors: list[ValidationError] | None = None,
    ) -> None:
        self.errors: list[ValidationError] = list(errors or [])
        super().__init__(message)

    @property
    def messages(self) -> list[str]:
        """Messages of the collected violations, in the order recorded."""
        return [error.message for error in self.errors]
