"""Testes dos settings carregados de variáveis de ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    CloudinarySettings,
    GCSSettings,
    MediaImportSettings,
    MetadataStoreSettings,
    get_base_settings,
    get_cloudinary_settings,
    get_media_import_settings,
    get_metadata_store_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for getter in (
        get_base_settings,
        get_cloudinary_settings,
        get_media_import_settings,
        get_metadata_store_settings,
    ):
        getter.cache_clear()
    yield
    for getter in (
        get_base_settings,
        get_cloudinary_settings,
        get_media_import_settings,
        get_metadata_store_settings,
    ):
        getter.cache_clear()


class TestBaseSettings:
    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("PUBLIC_BASE_URL", "https://media.example/")
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

        settings = get_base_settings()

        assert settings.environment == "production"
        assert settings.is_production is True
        assert settings.public_base_url == "https://media.example"
        assert settings.redis_url == "redis://localhost:6379/0"

    def test_unknown_environment_falls_back_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "qa")
        assert get_base_settings().environment == "development"

    def test_validate_rejects_relative_public_url(self) -> None:
        errors = BaseSettings(public_base_url="media.example").validate()
        assert any("PUBLIC_BASE_URL" in error for error in errors)


class TestMetadataStoreSettings:
    def test_memory_forbidden_outside_development(self) -> None:
        errors = MetadataStoreSettings(backend="memory").validate(BaseSettings(environment="production"))
        assert any("proibido" in error for error in errors)

    def test_redis_requires_url(self) -> None:
        errors = MetadataStoreSettings(backend="redis").validate(BaseSettings())
        assert errors == ["METADATA_STORE_BACKEND=redis requer REDIS_URL configurado"]

    def test_none_disables_dedupe(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("METADATA_STORE_BACKEND", "none")
        settings = get_metadata_store_settings()
        assert settings.enabled is False
        assert settings.validate(BaseSettings()) == []


class TestMediaImportSettings:
    def test_plan_limits(self) -> None:
        settings = MediaImportSettings()
        assert settings.max_size_for_plan("free") == 100 * 1024 * 1024
        assert settings.max_size_for_plan("PRO") == 1024 * 1024 * 1024
        assert settings.max_size_for_plan(None) == settings.max_bytes_free
        assert settings.max_size_for_plan("enterprise") == settings.max_bytes_free

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMPORT_MAX_BYTES_FREE", "10")
        monkeypatch.setenv("IMPORT_MAX_BYTES_PRO", "20")
        settings = get_media_import_settings()
        assert settings.max_size_for_plan("free") == 10
        assert settings.max_size_for_plan("pro") == 20
        assert settings.validate() == []

    def test_validate_rejects_inverted_limits(self) -> None:
        errors = MediaImportSettings(max_bytes_free=10, max_bytes_pro=5).validate()
        assert "IMPORT_MAX_BYTES_PRO deve ser >= IMPORT_MAX_BYTES_FREE" in errors


class TestCloudinarySettings:
    def test_disabled_without_api_key(self) -> None:
        settings = CloudinarySettings()
        assert settings.enabled is False
        assert settings.validate() == []

    def test_enabled_requires_cloud_and_secret(self) -> None:
        errors = CloudinarySettings(api_key="k").validate()
        assert len(errors) == 2

    def test_upload_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "demo")
        monkeypatch.setenv("CLOUDINARY_API_KEY", "key")
        settings = get_cloudinary_settings()
        assert settings.upload_url == "https://api.cloudinary.com/v1_1/demo/video/upload"


def test_gcs_backend_requires_bucket() -> None:
    assert GCSSettings(backend="gcs").validate() == [
        "BUCKET_BACKEND=gcs requer GCS_BUCKET_MEDIA configurado"
    ]
