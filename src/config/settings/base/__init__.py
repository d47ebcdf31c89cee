"""Settings base: ambiente do serviço e metadata store."""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.metadata_store import (
    MetadataStoreBackend,
    MetadataStoreSettings,
    get_metadata_store_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "MetadataStoreBackend",
    "MetadataStoreSettings",
    "get_base_settings",
    "get_metadata_store_settings",
]
