"""Category entity with fail-fast validation."""

from collections.abc import Callable
from datetime import datetime
from typing import Self

from pydantic import BaseModel, Field

from media_catalog.domain.models.video import new_id, utc_now
from media_catalog.domain.validation.domain_validation import (
    ensure,
    max_length,
    min_length,
    not_null,
    not_null_or_empty,
)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


class Category(BaseModel):
    """A category videos can be filed under.

    Unlike Video, a Category refuses to exist in an invalid state: every
    mutation validates immediately and raises on the first problem.
    """

    id: str = Field(frozen=True)
    name: str
    description: str
    is_active: bool = True
    created_at: datetime = Field(frozen=True)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        is_active: bool = True,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> Self:
        category = cls(
            id=id_factory(),
            name=name,
            description=description,
            is_active=is_active,
            created_at=clock(),
        )
        category.check()
        return category

    def activate(self) -> None:
        self.is_active = True
        self.check()

    def deactivate(self) -> None:
        self.is_active = False
        self.check()

    def update(self, name: str, description: str | None = None) -> None:
        self.name = name
        if description is not None:
            self.description = description
        self.check()

    def check(self) -> None:
        """Raise EntityValidationException for the first invalid field."""
        ensure(not_null_or_empty(self.name, "Name"))
        ensure(
            min_length(self.name, NAME_MIN_LENGTH, "Name"),
            max_length(self.name, NAME_MAX_LENGTH, "Name"),
            not_null(self.description, "Description"),
        )
        ensure(max_length(self.description, DESCRIPTION_MAX_LENGTH, "Description"))
