"""Settings de infraestrutura GCP (bucket de mídia)."""

from __future__ import annotations

from config.settings.infra.gcs import GCSSettings, get_gcs_settings

__all__ = ["GCSSettings", "get_gcs_settings"]
