"""Infrastructure factory for creating service instances from configuration."""

import asyncio
from typing import Any, cast

from media_catalog.application.services import (
    CreateCategoryService,
    CreateVideoService,
    DeleteVideoService,
    GetVideoService,
    ListVideosService,
    UpdateVideoService,
    UploadMediasService,
)
from media_catalog.commons.infrastructure.blob import (
    BlobStorageBase,
    HealthStatus,
    MinioBlobStorage,
)
from media_catalog.commons.infrastructure.documentdb import (
    DocumentDBBase,
    MongoDBDocumentDB,
)
from media_catalog.commons.settings.models import DocumentDBSettings, Settings
from media_catalog.commons.telemetry import get_logger
from media_catalog.domain.repositories import RelationKind
from media_catalog.infrastructure.persistence import (
    DocumentCategoryRepository,
    DocumentRelatedAggregateRepository,
    DocumentUnitOfWork,
    DocumentVideoRepository,
)
from media_catalog.infrastructure.storage import BlobStorageService

logger = get_logger(__name__)


def build_connection_string(settings: DocumentDBSettings) -> str:
    if settings.username and settings.password:
        return (
            f"mongodb://{settings.username}:{settings.password}"
            f"@{settings.host}:{settings.port}"
            f"/?authSource={settings.auth_source}"
        )
    return f"mongodb://{settings.host}:{settings.port}"


class InfrastructureFactory:
    """Factory for infrastructure providers and the use-case services.

    Providers are created once and shared. Every use-case service gets its
    own unit of work.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize factory with settings.

        Args:
            settings: Application settings.
        """
        self._settings = settings
        self._instances: dict[str, Any] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    # =========================================================================
    # Providers
    # =========================================================================

    def get_blob_storage(self) -> BlobStorageBase:
        if "blob_storage" not in self._instances:
            blob_settings = self._settings.blob_storage
            self._instances["blob_storage"] = MinioBlobStorage(
                endpoint=blob_settings.endpoint,
                access_key=blob_settings.access_key,
                secret_key=blob_settings.secret_key,
                secure=blob_settings.use_ssl,
                region=blob_settings.region,
            )
        return cast("BlobStorageBase", self._instances["blob_storage"])

    def get_document_db(self) -> DocumentDBBase:
        if "document_db" not in self._instances:
            doc_settings = self._settings.document_db
            self._instances["document_db"] = MongoDBDocumentDB(
                connection_string=build_connection_string(doc_settings),
                database_name=doc_settings.database,
            )
        return cast("DocumentDBBase", self._instances["document_db"])

    def get_storage_service(self) -> BlobStorageService:
        if "storage_service" not in self._instances:
            self._instances["storage_service"] = BlobStorageService(
                self.get_blob_storage(),
                self._settings.blob_storage.buckets.media,
            )
        return cast("BlobStorageService", self._instances["storage_service"])

    def get_related_repository(self) -> DocumentRelatedAggregateRepository:
        if "related_repository" not in self._instances:
            collections = self._settings.document_db.collections
            self._instances["related_repository"] = DocumentRelatedAggregateRepository(
                self.get_document_db(),
                {
                    RelationKind.CATEGORY: collections.categories,
                    RelationKind.GENRE: collections.genres,
                    RelationKind.CAST_MEMBER: collections.cast_members,
                },
            )
        return cast(
            "DocumentRelatedAggregateRepository",
            self._instances["related_repository"],
        )

    def create_unit_of_work(self) -> DocumentUnitOfWork:
        return DocumentUnitOfWork(self.get_document_db())

    def create_video_repository(
        self, unit_of_work: DocumentUnitOfWork
    ) -> DocumentVideoRepository:
        return DocumentVideoRepository(
            self.get_document_db(),
            unit_of_work,
            self._settings.document_db.collections.videos,
        )

    # =========================================================================
    # Use cases
    # =========================================================================

    def create_video_service(self) -> CreateVideoService:
        uow = self.create_unit_of_work()
        return CreateVideoService(
            self.create_video_repository(uow),
            self.get_related_repository(),
            self.get_storage_service(),
            uow,
        )

    def update_video_service(self) -> UpdateVideoService:
        uow = self.create_unit_of_work()
        return UpdateVideoService(
            self.create_video_repository(uow),
            self.get_related_repository(),
            uow,
        )

    def upload_medias_service(self) -> UploadMediasService:
        uow = self.create_unit_of_work()
        return UploadMediasService(
            self.create_video_repository(uow),
            self.get_storage_service(),
            uow,
        )

    def delete_video_service(self) -> DeleteVideoService:
        uow = self.create_unit_of_work()
        return DeleteVideoService(
            self.create_video_repository(uow),
            self.get_storage_service(),
            uow,
        )

    def get_video_service(self) -> GetVideoService:
        return GetVideoService(self.create_video_repository(self.create_unit_of_work()))

    def create_category_service(self) -> CreateCategoryService:
        uow = self.create_unit_of_work()
        return CreateCategoryService(
            DocumentCategoryRepository(
                uow, self._settings.document_db.collections.categories
            ),
            uow,
        )

    def list_videos_service(self) -> ListVideosService:
        return ListVideosService(
            self.create_video_repository(self.create_unit_of_work()),
            max_page_size=self._settings.catalog.max_page_size,
        )

    async def health_check(self) -> dict[str, HealthStatus]:
        """Check the object store and the document database concurrently.

        Returns:
            Health status per component name.
        """
        components = {
            "blob_storage": self.get_blob_storage(),
            "document_db": self.get_document_db(),
        }
        statuses = await asyncio.gather(
            *(component.health_check() for component in components.values())
        )
        results = dict(zip(components, statuses, strict=True))
        for name, status in results.items():
            if not status.healthy:
                logger.warning(
                    "Component unhealthy",
                    extra={"component": name, "reason": status.message},
                )
        return results

    async def close_all(self) -> None:
        """Close every provider that holds a connection."""
        for name, instance in self._instances.items():
            close = getattr(instance, "close", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as e:
                logger.warning(
                    "Failed to close provider",
                    extra={"provider": name, "error": str(e)},
                )

        self._instances.clear()


class _FactoryHolder:
    """Holder for the factory singleton to avoid global statements."""

    instance: InfrastructureFactory | None = None


def get_factory(settings: Settings | None = None) -> InfrastructureFactory:
    """Get or create the infrastructure factory singleton.

    Args:
        settings: Settings to use. Required on first call.

    Raises:
        ValueError: If settings not provided on first call.
    """
    if _FactoryHolder.instance is None:
        if settings is None:
            raise ValueError("Settings required to initialize factory")
        _FactoryHolder.instance = InfrastructureFactory(settings)

    return _FactoryHolder.instance


def reset_factory() -> None:
    """Reset the factory singleton (for testing)."""
    _FactoryHolder.instance = None
