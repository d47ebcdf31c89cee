"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.protocols.bucket_store import BucketStoreProtocol
from app.protocols.metadata_store import MetadataStoreProtocol


class MemoryMetadataStore(MetadataStoreProtocol):
    """Mapeamento sha256 → asset_id em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    async def get_asset_id(self, sha256: str) -> str | None:
        return self._store.get(sha256)

    async def set_asset_id(self, sha256: str, asset_id: str) -> bool:
        if sha256 in self._store:
            return False
        self._store[sha256] = asset_id
        return True

    async def ping(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class StoredObject:
    """Objeto gravado no bucket em memória."""

    data: bytes
    content_type: str
    content_disposition: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


class MemoryBucketStore(BucketStoreProtocol):
    """Bucket em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self.objects: dict[str, StoredObject] = {}

    async def put(
        self,
        key: str,
        data: bytes,
        *,
        content_type: str,
        content_disposition: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        self.objects[key] = StoredObject(
            data=data,
            content_type=content_type,
            content_disposition=content_disposition,
            metadata=dict(metadata or {}),
        )
