"""Unit tests for CreateVideoService."""

import asyncio
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from media_catalog.application.dtos.video import CreateVideoInput, FileInput
from media_catalog.application.exceptions import (
    CommitException,
    RelatedAggregateException,
    StorageException,
)
from media_catalog.application.services.create_video import CreateVideoService
from media_catalog.domain.exceptions import EntityValidationException
from media_catalog.domain.models.video import Rating, Video
from media_catalog.domain.repositories import RelationKind
from media_catalog.domain.value_objects import MediaStatus

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def video_repository():
    repository = MagicMock()
    repository.insert = AsyncMock()
    return repository


@pytest.fixture
def related_repository():
    """Every requested id exists unless a test says otherwise."""
    repository = MagicMock()
    repository.resolve_ids = AsyncMock(side_effect=lambda kind, ids: list(ids))
    return repository


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.upload = AsyncMock(side_effect=lambda name, data, content_type=None: name)
    storage.delete = AsyncMock()
    return storage


@pytest.fixture
def unit_of_work():
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def service(video_repository, related_repository, storage, unit_of_work):
    return CreateVideoService(
        video_repository,
        related_repository,
        storage,
        unit_of_work,
        clock=lambda: FIXED_NOW,
        id_factory=lambda: "vid-1",
    )


def make_request(**overrides) -> CreateVideoInput:
    params = {
        "title": "The Matrix",
        "description": "A hacker learns the truth about his reality.",
        "year_launched": 1999,
        "opened": True,
        "published": True,
        "duration": 136,
        "rating": Rating.RATE_14,
    }
    params.update(overrides)
    return CreateVideoInput(**params)


def with_all_files(**overrides) -> CreateVideoInput:
    return make_request(
        thumb=FileInput(extension="jpg", stream=b"thumb"),
        banner=FileInput(extension="png", stream=b"banner"),
        thumb_half=FileInput(extension="jpg", stream=b"half"),
        media=FileInput(extension="mp4", stream=b"media", content_type="video/mp4"),
        trailer=FileInput(extension="mp4", stream=b"trailer"),
        **overrides,
    )


def uploaded_names(storage) -> list[str]:
    return [c.args[0] for c in storage.upload.await_args_list]


def deleted_paths(storage) -> list[str]:
    return [c.args[0] for c in storage.delete.await_args_list]


# =============================================================================
# Tests
# =============================================================================


class TestCreateVideoSuccess:
    """Tests for the happy path."""

    async def test_create_without_files(
        self, service, video_repository, storage, unit_of_work
    ):
        output = await service.create(make_request())

        assert output.id == "vid-1"
        assert output.created_at == FIXED_NOW
        assert output.rating == "14"
        assert output.thumb_file_url is None
        storage.upload.assert_not_awaited()
        video_repository.insert.assert_awaited_once()
        unit_of_work.commit.assert_awaited_once()

    async def test_create_with_all_files(
        self, service, video_repository, storage, unit_of_work
    ):
        output = await service.create(with_all_files())

        assert uploaded_names(storage) == [
            "vid-1-thumb.jpg",
            "vid-1-banner.png",
            "vid-1-thumbhalf.jpg",
            "vid-1-media.mp4",
            "vid-1-trailer.mp4",
        ]
        video_repository.insert.assert_awaited_once()
        unit_of_work.commit.assert_awaited_once()
        storage.delete.assert_not_awaited()

        assert output.thumb_file_url == "vid-1-thumb.jpg"
        assert output.banner_file_url == "vid-1-banner.png"
        assert output.thumb_half_file_url == "vid-1-thumbhalf.jpg"
        assert output.video_file_url == "vid-1-media.mp4"
        assert output.trailer_file_url == "vid-1-trailer.mp4"

    async def test_inserted_video_carries_files_and_relations(
        self, service, video_repository
    ):
        await service.create(
            with_all_files(categories_ids=["c1"], genres_ids=["g1", "g2"])
        )

        video: Video = video_repository.insert.await_args.args[0]
        assert video.id == "vid-1"
        assert video.categories == ["c1"]
        assert video.genres == ["g1", "g2"]
        assert video.cast_members == []
        assert video.media.file_path == "vid-1-media.mp4"
        assert video.media.status == MediaStatus.PENDING
        assert video.trailer.file_path == "vid-1-trailer.mp4"

    async def test_passes_stream_and_content_type(self, service, storage):
        await service.create(
            make_request(
                media=FileInput(
                    extension="mp4", stream=b"media", content_type="video/mp4"
                )
            )
        )
        storage.upload.assert_awaited_once_with(
            "vid-1-media.mp4", b"media", "video/mp4"
        )

    async def test_insert_happens_before_commit(
        self, service, video_repository, unit_of_work
    ):
        manager = MagicMock()
        manager.attach_mock(video_repository.insert, "insert")
        manager.attach_mock(unit_of_work.commit, "commit")

        await service.create(make_request())

        assert [c[0] for c in manager.mock_calls] == ["insert", "commit"]

    async def test_output_lists_relations(self, service):
        output = await service.create(
            make_request(categories_ids=["c1"], cast_members_ids=["m1", "m2"])
        )

        assert [c.id for c in output.categories] == ["c1"]
        assert [m.id for m in output.cast_members] == ["m1", "m2"]


class TestCreateVideoValidation:
    """Tests for rejections that happen before any I/O."""

    async def test_validation_errors_are_collected(
        self, service, related_repository, storage, video_repository, unit_of_work
    ):
        request = with_all_files(
            title="", description="a" * 4001, categories_ids=["c1"]
        )

        with pytest.raises(EntityValidationException) as exc_info:
            await service.create(request)

        assert str(exc_info.value) == "There are validation errors."
        assert exc_info.value.messages == [
            "Title should not be empty or null.",
            "Description should be less or equal 4000 characters long.",
        ]
        related_repository.resolve_ids.assert_not_awaited()
        storage.upload.assert_not_awaited()
        video_repository.insert.assert_not_awaited()
        unit_of_work.commit.assert_not_awaited()

    async def test_missing_related_ids(
        self, service, related_repository, storage, unit_of_work
    ):
        related_repository.resolve_ids = AsyncMock(return_value=["c1"])

        with pytest.raises(RelatedAggregateException) as exc_info:
            await service.create(with_all_files(categories_ids=["c1", "c2", "c3"]))

        assert str(exc_info.value) == "Related category Id (or Ids) not found: c2,c3."
        storage.upload.assert_not_awaited()
        unit_of_work.commit.assert_not_awaited()

    async def test_checks_every_relation_kind(self, service, related_repository):
        await service.create(
            make_request(
                categories_ids=["c1"], genres_ids=["g1"], cast_members_ids=["m1"]
            )
        )

        assert related_repository.resolve_ids.await_args_list == [
            call(RelationKind.CATEGORY, ["c1"]),
            call(RelationKind.GENRE, ["g1"]),
            call(RelationKind.CAST_MEMBER, ["m1"]),
        ]

    async def test_missing_cast_member_after_valid_categories(
        self, service, related_repository, storage
    ):
        async def resolve(kind, ids):
            return [] if kind is RelationKind.CAST_MEMBER else list(ids)

        related_repository.resolve_ids = AsyncMock(side_effect=resolve)

        with pytest.raises(RelatedAggregateException) as exc_info:
            await service.create(
                make_request(categories_ids=["c1"], cast_members_ids=["m9"])
            )

        assert exc_info.value.kind is RelationKind.CAST_MEMBER
        assert exc_info.value.missing_ids == ["m9"]
        storage.upload.assert_not_awaited()

    async def test_empty_relation_lists_skip_lookup(self, service, related_repository):
        await service.create(make_request(categories_ids=[], genres_ids=None))
        related_repository.resolve_ids.assert_not_awaited()


class TestCreateVideoCompensation:
    """Tests for cleanup of uploaded files when creation fails."""

    async def test_upload_failure_deletes_earlier_uploads(
        self, service, storage, video_repository, unit_of_work
    ):
        failure = StorageException("upload", "vid-1-thumbhalf.jpg", "timeout")

        async def upload(name, data, content_type=None):
            if "thumbhalf" in name:
                raise failure
            return name

        storage.upload = AsyncMock(side_effect=upload)

        with pytest.raises(StorageException) as exc_info:
            await service.create(with_all_files())

        assert exc_info.value is failure
        assert deleted_paths(storage) == ["vid-1-thumb.jpg", "vid-1-banner.png"]
        video_repository.insert.assert_not_awaited()
        unit_of_work.commit.assert_not_awaited()
        unit_of_work.rollback.assert_awaited_once()

    async def test_commit_failure_deletes_every_upload(
        self, service, storage, unit_of_work
    ):
        unit_of_work.commit = AsyncMock(side_effect=CommitException("down"))

        with pytest.raises(CommitException):
            await service.create(with_all_files())

        assert deleted_paths(storage) == [
            "vid-1-thumb.jpg",
            "vid-1-thumbhalf.jpg",
            "vid-1-banner.png",
            "vid-1-media.mp4",
            "vid-1-trailer.mp4",
        ]

    async def test_commit_failure_without_files_deletes_nothing(
        self, service, storage, unit_of_work
    ):
        unit_of_work.commit = AsyncMock(side_effect=CommitException("down"))

        with pytest.raises(CommitException):
            await service.create(make_request())

        storage.delete.assert_not_awaited()

    async def test_failed_delete_does_not_stop_cleanup(
        self, service, storage, unit_of_work
    ):
        original = CommitException("down")
        unit_of_work.commit = AsyncMock(side_effect=original)

        async def delete(path):
            if path == "vid-1-banner.png":
                raise StorageException("delete", path, "refused")

        storage.delete = AsyncMock(side_effect=delete)

        with pytest.raises(CommitException) as exc_info:
            await service.create(with_all_files())

        assert exc_info.value is original
        assert storage.delete.await_count == 5
        notes = exc_info.value.__notes__
        assert len(notes) == 1
        assert "vid-1-banner.png" in notes[0]

    async def test_cancellation_during_upload_compensates(
        self, service, storage, unit_of_work
    ):
        async def upload(name, data, content_type=None):
            if "media" in name:
                raise asyncio.CancelledError
            return name

        storage.upload = AsyncMock(side_effect=upload)

        with pytest.raises(asyncio.CancelledError):
            await service.create(with_all_files())

        assert deleted_paths(storage) == [
            "vid-1-thumb.jpg",
            "vid-1-thumbhalf.jpg",
            "vid-1-banner.png",
        ]
        unit_of_work.commit.assert_not_awaited()

    async def test_insert_failure_compensates(
        self, service, storage, video_repository, unit_of_work
    ):
        video_repository.insert = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await service.create(
                make_request(trailer=FileInput(extension="mp4", stream=b"t"))
            )

        assert deleted_paths(storage) == ["vid-1-trailer.mp4"]
        unit_of_work.commit.assert_not_awaited()
        unit_of_work.rollback.assert_awaited_once()
