"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - redis_metadata_store: mapeamento sha256 → asset_id no Redis (Upstash)
    - gcs_bucket_store: gravação de vídeos no Google Cloud Storage
    - memory_stores: stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.gcs_bucket_store import GCSBucketStore
from app.infra.stores.memory_stores import (
    MemoryBucketStore,
    MemoryMetadataStore,
    StoredObject,
)
from app.infra.stores.redis_metadata_store import RedisMetadataStore

__all__ = [
    # GCS
    "GCSBucketStore",
    # Memory (dev/test)
    "MemoryBucketStore",
    "MemoryMetadataStore",
    # Redis (Upstash)
    "RedisMetadataStore",
    "StoredObject",
]
