"""Factories dos colaboradores da importação baseadas em settings."""

from __future__ import annotations

import logging

from app.bootstrap.clients import create_async_redis_client, create_storage_client
from app.infra.auth import Nip98AuthVerifier
from app.infra.media import CloudinaryClient, HttpThumbnailTrigger, HttpVideoFetcher
from app.infra.stores import (
    GCSBucketStore,
    MemoryBucketStore,
    MemoryMetadataStore,
    RedisMetadataStore,
)
from app.protocols import (
    AuthVerifierProtocol,
    BucketStoreProtocol,
    MediaProcessorProtocol,
    MetadataStoreProtocol,
    ThumbnailTriggerProtocol,
    VideoFetcherProtocol,
)
from app.use_cases.url_import import ImportVideoFromUrlUseCase
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_cloudinary_settings,
    get_gcs_settings,
    get_media_import_settings,
    get_metadata_store_settings,
    get_thumbnail_settings,
)

logger = logging.getLogger(__name__)


def create_metadata_store() -> MetadataStoreProtocol | None:
    """Cria metadata store; backend `none` desliga a deduplicação."""
    settings = get_metadata_store_settings()

    if settings.backend == "redis":
        store = RedisMetadataStore(create_async_redis_client(), key_prefix=settings.key_prefix)
        logger.info("metadata_store_created", extra={"backend": "redis"})
        return store

    if settings.backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("metadata_store_created", extra={"backend": "memory"})
        return MemoryMetadataStore()

    logger.info("metadata_store_disabled", extra={"backend": settings.backend})
    return None


def create_bucket_store() -> BucketStoreProtocol:
    """Cria bucket store conforme BUCKET_BACKEND."""
    settings = get_gcs_settings()

    if settings.backend == "gcs":
        store = GCSBucketStore(create_storage_client(), settings.bucket_media)
        logger.info("bucket_store_created", extra={"backend": "gcs"})
        return store

    if settings.backend == "memory":
        logger.info("bucket_store_created", extra={"backend": "memory"})
        return MemoryBucketStore()

    msg = f"BUCKET_BACKEND inválido: {settings.backend}"
    raise ValueError(msg)


def create_auth_verifier() -> AuthVerifierProtocol:
    return Nip98AuthVerifier(get_auth_settings())


def create_video_fetcher() -> VideoFetcherProtocol:
    settings = get_media_import_settings()
    return HttpVideoFetcher(
        user_agent=settings.user_agent,
        timeout_seconds=settings.fetch_timeout_seconds,
    )


def create_media_processor() -> MediaProcessorProtocol | None:
    """Cloudinary só entra no wiring quando há credenciais."""
    settings = get_cloudinary_settings()
    if not settings.enabled:
        logger.info("media_processor_disabled", extra={"processor": "cloudinary"})
        return None
    return CloudinaryClient(settings)


def create_thumbnail_trigger() -> ThumbnailTriggerProtocol | None:
    settings = get_thumbnail_settings()
    if not settings.enabled:
        logger.info("thumbnail_trigger_disabled")
        return None
    return HttpThumbnailTrigger(settings)


def create_import_use_case(
    *, metadata_store: MetadataStoreProtocol | None = None
) -> ImportVideoFromUrlUseCase:
    """Monta o caso de uso com as implementações concretas.

    O metadata store vem de fora para ser compartilhado com o readiness.
    """
    return ImportVideoFromUrlUseCase(
        auth_verifier=create_auth_verifier(),
        video_fetcher=create_video_fetcher(),
        bucket_store=create_bucket_store(),
        settings=get_media_import_settings(),
        object_prefix=get_gcs_settings().object_prefix,
        metadata_store=metadata_store,
        media_processor=create_media_processor(),
        thumbnail_trigger=create_thumbnail_trigger(),
    )
