"""Unit tests for MongoDB document database provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

PROVIDER_MODULE = "media_catalog.commons.infrastructure.documentdb.mongodb_provider"


class AsyncCursor:
    """Minimal stand-in for a Motor cursor."""

    def __init__(self, docs):
        self._docs = list(docs)
        self.sort = MagicMock(return_value=self)
        self.skip = MagicMock(return_value=self)
        self.limit = MagicMock(return_value=self)

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield doc


class TestMongoDBDocumentDB:
    """Tests for MongoDBDocumentDB provider.

    These tests verify the ID mapping between the domain ``id`` and
    MongoDB's ``_id`` field.
    """

    @pytest.fixture
    def mock_motor_client(self):
        with patch(f"{PROVIDER_MODULE}.AsyncIOMotorClient") as mock_client_class:
            mock_client = MagicMock()
            mock_db = MagicMock()
            mock_collection = MagicMock()

            mock_client.__getitem__ = MagicMock(return_value=mock_db)
            mock_db.__getitem__ = MagicMock(return_value=mock_collection)
            mock_client_class.return_value = mock_client

            yield {
                "client_class": mock_client_class,
                "client": mock_client,
                "db": mock_db,
                "collection": mock_collection,
            }

    @pytest.fixture
    def mongodb_provider(self, mock_motor_client):
        from media_catalog.commons.infrastructure.documentdb.mongodb_provider import (
            MongoDBDocumentDB,
        )

        return MongoDBDocumentDB(
            connection_string="mongodb://localhost:27017",
            database_name="test_db",
        )

    # =========================================================================
    # Insert / read
    # =========================================================================

    async def test_insert_uses_id_as_mongodb_id(
        self, mongodb_provider, mock_motor_client
    ):
        collection = mock_motor_client["collection"]
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id="vid-1"))
        document = {"id": "vid-1", "title": "The Matrix"}

        result = await mongodb_provider.insert("videos", document)

        stored = collection.insert_one.call_args[0][0]
        assert stored == {"_id": "vid-1", "title": "The Matrix"}
        assert document == {"id": "vid-1", "title": "The Matrix"}
        assert result == "vid-1"

    async def test_find_by_id_restores_id(self, mongodb_provider, mock_motor_client):
        collection = mock_motor_client["collection"]
        collection.find_one = AsyncMock(
            return_value={"_id": "vid-1", "title": "The Matrix"}
        )

        result = await mongodb_provider.find_by_id("videos", "vid-1")

        collection.find_one.assert_awaited_once_with({"_id": "vid-1"})
        assert result == {"id": "vid-1", "title": "The Matrix"}

    async def test_find_by_id_missing(self, mongodb_provider, mock_motor_client):
        mock_motor_client["collection"].find_one = AsyncMock(return_value=None)
        assert await mongodb_provider.find_by_id("videos", "nope") is None

    async def test_find_applies_paging_and_sort(
        self, mongodb_provider, mock_motor_client
    ):
        cursor = AsyncCursor([{"_id": "a"}, {"_id": "b"}])
        collection = mock_motor_client["collection"]
        collection.find = MagicMock(return_value=cursor)

        result = await mongodb_provider.find(
            "videos", {"published": True}, skip=10, limit=5, sort=[("title", 1)]
        )

        collection.find.assert_called_once_with({"published": True})
        cursor.sort.assert_called_once_with([("title", 1)])
        cursor.skip.assert_called_once_with(10)
        cursor.limit.assert_called_once_with(5)
        assert result == [{"id": "a"}, {"id": "b"}]

    async def test_find_without_sort(self, mongodb_provider, mock_motor_client):
        cursor = AsyncCursor([])
        mock_motor_client["collection"].find = MagicMock(return_value=cursor)

        assert await mongodb_provider.find("videos", {}) == []
        cursor.sort.assert_not_called()

    # =========================================================================
    # Update / delete
    # =========================================================================

    async def test_update_sets_fields_without_id(
        self, mongodb_provider, mock_motor_client
    ):
        collection = mock_motor_client["collection"]
        collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))

        result = await mongodb_provider.update(
            "videos", "vid-1", {"id": "vid-1", "title": "New"}
        )

        collection.update_one.assert_awaited_once_with(
            {"_id": "vid-1"}, {"$set": {"title": "New"}}
        )
        assert result is True

    async def test_update_unmatched(self, mongodb_provider, mock_motor_client):
        mock_motor_client["collection"].update_one = AsyncMock(
            return_value=MagicMock(matched_count=0)
        )
        assert await mongodb_provider.update("videos", "nope", {"title": "x"}) is False

    async def test_delete(self, mongodb_provider, mock_motor_client):
        collection = mock_motor_client["collection"]
        collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))

        assert await mongodb_provider.delete("videos", "vid-1") is True
        collection.delete_one.assert_awaited_once_with({"_id": "vid-1"})

    async def test_delete_missing(self, mongodb_provider, mock_motor_client):
        mock_motor_client["collection"].delete_one = AsyncMock(
            return_value=MagicMock(deleted_count=0)
        )
        assert await mongodb_provider.delete("videos", "nope") is False

    # =========================================================================
    # Count / health
    # =========================================================================

    async def test_count_with_filters(self, mongodb_provider, mock_motor_client):
        collection = mock_motor_client["collection"]
        collection.count_documents = AsyncMock(return_value=3)

        assert await mongodb_provider.count("videos", {"opened": True}) == 3
        collection.count_documents.assert_awaited_once_with({"opened": True})

    async def test_count_without_filters(self, mongodb_provider, mock_motor_client):
        collection = mock_motor_client["collection"]
        collection.estimated_document_count = AsyncMock(return_value=7)

        assert await mongodb_provider.count("videos") == 7

    async def test_health_check_ok(self, mongodb_provider, mock_motor_client):
        mock_motor_client["client"].admin.command = AsyncMock(return_value={"ok": 1})

        status = await mongodb_provider.health_check()

        assert status.healthy is True
        assert status.details == {"database": "test_db"}

    async def test_health_check_failure(self, mongodb_provider, mock_motor_client):
        mock_motor_client["client"].admin.command = AsyncMock(
            side_effect=RuntimeError("unreachable")
        )

        status = await mongodb_provider.health_check()

        assert status.healthy is False
        assert "unreachable" in status.message

    async def test_close(self, mongodb_provider, mock_motor_client):
        await mongodb_provider.close()
        mock_motor_client["client"].close.assert_called_once()
