"""Bucket store no Google Cloud Storage.

O SDK do GCS é síncrono; a gravação roda em thread para não bloquear
o event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.protocols.bucket_store import BucketStoreProtocol
from utils.errors import BucketStorageError

if TYPE_CHECKING:
    from google.cloud.storage import Client as StorageClient

logger = logging.getLogger(__name__)


class GCSBucketStore(BucketStoreProtocol):
    """Grava vídeos importados em um bucket GCS.

    Args:
        client: Cliente google-cloud-storage
        bucket_name: Nome do bucket de mídia
    """

    def __init__(self, client: StorageClient, bucket_name: str) -> None:
        self._client = client
        self._bucket_name = bucket_name

    async def put(
        self,
        key: str,
        data: bytes,
        *,
        content_type: str,
        content_disposition: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        try:
            await asyncio.to_thread(
                self._put_sync,
                key,
                data,
                content_type,
                content_disposition,
                metadata or {},
            )
        except Exception as exc:
            logger.error(
                "gcs_object_write_failed",
                extra={"bucket": self._bucket_name, "key": key, "error_type": type(exc).__name__},
            )
            raise BucketStorageError(f"Falha ao gravar objeto {key} no bucket") from exc

        logger.info(
            "gcs_object_written",
            extra={"bucket": self._bucket_name, "key": key, "size_bytes": len(data)},
        )

    def _put_sync(
        self,
        key: str,
        data: bytes,
        content_type: str,
        content_disposition: str | None,
        metadata: dict[str, str],
    ) -> None:
        blob = self._client.bucket(self._bucket_name).blob(key)
        blob.metadata = metadata
        if content_disposition:
            blob.content_disposition = content_disposition
        blob.upload_from_string(data, content_type=content_type)
