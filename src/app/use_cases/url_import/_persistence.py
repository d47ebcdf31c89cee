"""Estratégias de persistência do vídeo importado.

- primária: Cloudinary (processamento, moderação, thumbnails próprios)
- direta/fallback: bucket de objetos + mapeamento sha256 → asset_id
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.url_import import FetchedAsset
    from app.protocols import BucketStoreProtocol, MetadataStoreProtocol

logger = logging.getLogger(__name__)

# Marca de proveniência gravada nos metadados do objeto
UPLOAD_SOURCE_TAG = "url-import"


def generate_asset_id(sha256: str, now_ms: int) -> str:
    """Identificador `<epoch ms>-<8 primeiros hex do hash>`.

    Não é globalmente único: dois imports no mesmo milissegundo com o
    mesmo prefixo de hash colidem.
    """
    return f"{now_ms}-{sha256[:8]}"


def build_media_url(origin: str, path_prefix: str, asset_id: str) -> str:
    """URL pública do asset servido pelo próprio serviço."""
    return f"{origin.rstrip('/')}{path_prefix}{asset_id}"


def content_disposition_for(filename: str) -> str:
    safe_name = filename.replace('"', "").replace("\r", "").replace("\n", "")
    return f'inline; filename="{safe_name}"'


async def record_hash_mapping(
    metadata_store: MetadataStoreProtocol | None,
    sha256: str,
    asset_id: str,
) -> None:
    """Registra sha256 → asset_id; sem metadata store, dedupe fica desligado."""
    if metadata_store is None:
        logger.debug("metadata_store_not_configured", extra={"asset_id": asset_id})
        return
    await metadata_store.set_asset_id(sha256, asset_id)


async def store_in_bucket(
    *,
    bucket_store: BucketStoreProtocol,
    metadata_store: MetadataStoreProtocol | None,
    asset: FetchedAsset,
    asset_id: str,
    object_key: str,
    uploader_pubkey: str,
    uploaded_at_ms: int,
) -> None:
    """Grava o payload no bucket e registra o hash para dedupe.

    Raises:
        BucketStorageError: Falha na gravação (vira ServerError na borda).
    """
    await bucket_store.put(
        object_key,
        asset.content,
        content_type=asset.content_type,
        content_disposition=content_disposition_for(asset.filename),
        metadata={
            "sha256": asset.sha256,
            "originalUrl": asset.source_url,
            "uploaderPubkey": uploader_pubkey,
            "uploadedAt": str(uploaded_at_ms),
            "source": UPLOAD_SOURCE_TAG,
        },
    )
    logger.info(
        "bucket_object_stored",
        extra={"object_key": object_key, "size_bytes": asset.size},
    )
    await record_hash_mapping(metadata_store, asset.sha256, asset_id)
