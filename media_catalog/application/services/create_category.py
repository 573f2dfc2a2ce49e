"""Create-category orchestration."""

from collections.abc import Callable
from datetime import datetime

from media_catalog.application.dtos.category import CategoryOutput, CreateCategoryInput
from media_catalog.application.interfaces import UnitOfWorkBase
from media_catalog.commons.telemetry import LogContext, get_logger
from media_catalog.domain.models.category import Category
from media_catalog.domain.models.video import new_id, utc_now
from media_catalog.domain.repositories import CategoryRepositoryBase


class CreateCategoryService:
    """Creates a category.

    The entity validates itself on construction and raises on the first
    invalid field, so nothing is staged for an invalid request.
    """

    def __init__(
        self,
        category_repository: CategoryRepositoryBase,
        unit_of_work: UnitOfWorkBase,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._categories = category_repository
        self._uow = unit_of_work
        self._clock = clock
        self._id_factory = id_factory
        self._logger = get_logger(__name__)

    async def create(self, request: CreateCategoryInput) -> CategoryOutput:
        """Create a category.

        Raises:
            EntityValidationException: For the first invalid field.
            CommitException: If the commit fails.
        """
        category = Category.create(
            request.name,
            request.description,
            request.is_active,
            clock=self._clock,
            id_factory=self._id_factory,
        )

        with LogContext(category_id=category.id):
            await self._categories.insert(category)
            await self._uow.commit()

            self._logger.info(
                "Category created", extra={"category_name": category.name}
            )
            return CategoryOutput.from_category(category)
