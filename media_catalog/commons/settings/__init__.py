"""Settings management module."""

from media_catalog.commons.settings.loader import (
    SettingsLoader,
    get_settings,
    reset_settings,
)
from media_catalog.commons.settings.models import (
    AppSettings,
    BlobStorageSettings,
    BucketSettings,
    CatalogSettings,
    DocumentCollectionSettings,
    DocumentDBSettings,
    Settings,
    TelemetrySettings,
)

__all__ = [
    # Loader
    "SettingsLoader",
    "get_settings",
    "reset_settings",
    # Main settings
    "Settings",
    "AppSettings",
    "CatalogSettings",
    # Storage
    "BlobStorageSettings",
    "BucketSettings",
    "DocumentDBSettings",
    "DocumentCollectionSettings",
    # Telemetry
    "TelemetrySettings",
]
