"""Fail-fast validation helpers for single-field checks.

Each helper returns a ``ValidationError`` when the check fails and ``None``
otherwise, so entities can short-circuit on the first problem with
``ensure``. Aggregate-level checks use the notification handler instead.
"""

from typing import Any

from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.validation.handler import ValidationError


def not_null(target: Any, field_name: str) -> ValidationError | None:
    if target is None:
        return ValidationError(f"{field_name} should not be null.", field_name)
    return None


def not_null_or_empty(target: str | None, field_name: str) -> ValidationError | None:
    if target is None or not target.strip():
        return ValidationError(
            f"{field_name} should not be empty or null.", field_name
        )
    return None


def min_length(target: str, minimum: int, field_name: str) -> ValidationError | None:
    if len(target) < minimum:
        return ValidationError(
            f"{field_name} should be at least {minimum} characters long.",
            field_name,
        )
    return None


def max_length(target: str, maximum: int, field_name: str) -> ValidationError | None:
    if len(target) > maximum:
        return ValidationError(
            f"{field_name} should be less or equal {maximum} characters long.",
            field_name,
        )
    return None


def ensure(*results: ValidationError | None) -> None:
    """Raise for the first failed check.

    Arguments are evaluated eagerly by the caller, so pass checks that are
    safe to run together (e.g. a length check only after a null check).

    Raises:
        EntityValidationException: With the first violation's message.
    """
    for result in results:
        if result is not None:
            raise EntityValidationException(result.message, [result])
