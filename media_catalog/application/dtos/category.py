"""DTOs for category use cases."""

from datetime import datetime

from pydantic import BaseModel

from media_catalog.domain.models.category import Category


class CreateCategoryInput(BaseModel):
    """Request to create a category."""

    name: str
    description: str
    is_active: bool = True


class CategoryOutput(BaseModel):
    id: str
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_category(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )
