"""Notification-style validation handler."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single validation violation, optionally tagged with its field."""

    message: str
    field: str | None = None


class ValidationHandler(ABC):
    """Receives validation violations from validators."""

    @abstractmethod
    def handle_error(self, error: ValidationError) -> None:
        """Record a violation.

        Args:
            error: The violation found by a validator.
        """

    @property
    @abstractmethod
    def errors(self) -> list[ValidationError]:
        """Violations recorded so far, in the order they were handled."""

    def has_errors(self) -> bool:
        """Check whether any violation was recorded."""
        return len(self.errors) > 0


class NotificationValidationHandler(ValidationHandler):
    """Collects every violation instead of stopping at the first one."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def handle_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    @property
    def errors(self) -> list[ValidationError]:
        return list(self._errors)
