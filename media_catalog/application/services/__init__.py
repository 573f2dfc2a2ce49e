"""Use-case services orchestrating the domain and its collaborators."""

from media_catalog.application.services.create_category import CreateCategoryService
from media_catalog.application.services.create_video import CreateVideoService
from media_catalog.application.services.delete_video import DeleteVideoService
from media_catalog.application.services.get_video import GetVideoService
from media_catalog.application.services.list_videos import ListVideosService
from media_catalog.application.services.update_video import UpdateVideoService
from media_catalog.application.services.upload_medias import UploadMediasService

__all__ = [
    "CreateCategoryService",
    "CreateVideoService",
    "DeleteVideoService",
    "GetVideoService",
    "ListVideosService",
    "UpdateVideoService",
    "UploadMediasService",
]
