"""Agregador de settings do serviço de importação.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.auth import AuthSettings, get_auth_settings

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    MetadataStoreBackend,
    MetadataStoreSettings,
    get_base_settings,
    get_metadata_store_settings,
)
from config.settings.cloudinary import (
    CLOUDINARY_API_BASE_URL,
    CloudinarySettings,
    get_cloudinary_settings,
)

# Infrastructure settings
from config.settings.infra import (
    GCSSettings,
    get_gcs_settings,
)
from config.settings.media_import import (
    DEFAULT_PLAN,
    MediaImportSettings,
    get_media_import_settings,
)
from config.settings.thumbnail import ThumbnailSettings, get_thumbnail_settings

__all__ = [
    # Constants
    "CLOUDINARY_API_BASE_URL",
    "DEFAULT_PLAN",
    # Auth
    "AuthSettings",
    # Base
    "BaseSettings",
    # Cloudinary
    "CloudinarySettings",
    "Environment",
    # Infrastructure
    "GCSSettings",
    # Import
    "MediaImportSettings",
    "MetadataStoreBackend",
    "MetadataStoreSettings",
    # Thumbnail
    "ThumbnailSettings",
    "get_auth_settings",
    "get_base_settings",
    "get_cloudinary_settings",
    "get_gcs_settings",
    "get_media_import_settings",
    "get_metadata_store_settings",
    "get_thumbnail_settings",
]
