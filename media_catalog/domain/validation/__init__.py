"""Validation strategies: notification handler and fail-fast helpers."""

from media_catalog.domain.validation.domain_validation import (
    ensure,
    max_length,
    min_length,
    not_null,
    not_null_or_empty,
)
from media_catalog.domain.validation.handler import (
    NotificationValidationHandler,
    ValidationError,
    ValidationHandler,
)
from media_catalog.domain.validation.video_validator import VideoValidator

__all__ = [
    # Notification pattern
    "ValidationError",
    "ValidationHandler",
    "NotificationValidationHandler",
    "VideoValidator",
    # Fail-fast helpers
    "ensure",
    "not_null",
    "not_null_or_empty",
    "min_length",
    "max_length",
]
