"""Category repository backed by the document database."""

from media_catalog.domain.models.category import Category
from media_catalog.domain.repositories import CategoryRepositoryBase
from media_catalog.infrastructure.persistence.unit_of_work import DocumentUnitOfWork


class DocumentCategoryRepository(CategoryRepositoryBase):
    """Stages category writes on a ``DocumentUnitOfWork``."""

    def __init__(
        self, unit_of_work: DocumentUnitOfWork, collection: str = "categories"
    ) -> None:
        self._uow = unit_of_work
        self._collection = collection

    async def insert(self, category: Category) -> None:
        self._uow.register_insert(
            self._collection, category.id, category.model_dump(mode="json")
        )
