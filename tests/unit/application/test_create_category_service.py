"""Unit tests for CreateCategoryService."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from media_catalog.application.dtos.category import CreateCategoryInput
from media_catalog.application.exceptions import CommitException
from media_catalog.application.services.create_category import CreateCategoryService
from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.models.category import Category

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def category_repository():
    repository = MagicMock()
    repository.insert = AsyncMock()
    return repository


@pytest.fixture
def unit_of_work():
    uow = MagicMock()
    uow.commit = AsyncMock()
    return uow


@pytest.fixture
def service(category_repository, unit_of_work):
    return CreateCategoryService(
        category_repository,
        unit_of_work,
        clock=lambda: FIXED_NOW,
        id_factory=lambda: "cat-1",
    )


class TestCreateCategory:
    """Tests for CreateCategoryService.create."""

    async def test_create(self, service, category_repository, unit_of_work):
        output = await service.create(
            CreateCategoryInput(name="Documentary", description="Real stories")
        )

        [category] = category_repository.insert.await_args.args
        assert isinstance(category, Category)
        assert category.name == "Documentary"
        unit_of_work.commit.assert_awaited_once()
        assert output.id == "cat-1"
        assert output.is_active is True
        assert output.created_at == FIXED_NOW

    async def test_create_inactive(self, service):
        output = await service.create(
            CreateCategoryInput(name="Archive", description="", is_active=False)
        )

        assert output.is_active is False
        assert output.description == ""

    async def test_invalid_name_stages_nothing(
        self, service, category_repository, unit_of_work
    ):
        with pytest.raises(
            EntityValidationException,
            match="Name should be at least 3 characters long.",
        ):
            await service.create(CreateCategoryInput(name="ab", description="x"))

        category_repository.insert.assert_not_awaited()
        unit_of_work.commit.assert_not_awaited()

    async def test_commit_failure_propagates(self, service, unit_of_work):
        unit_of_work.commit = AsyncMock(side_effect=CommitException("down"))

        with pytest.raises(CommitException):
            await service.create(
                CreateCategoryInput(name="Documentary", description="Real stories")
            )
