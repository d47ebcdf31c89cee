"""Protocolo do bucket de objetos."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BucketStoreProtocol(ABC):
    """Contrato mínimo de gravação em bucket."""

    @abstractmethod
    async def put(
        self,
        key: str,
        data: bytes,
        *,
        content_type: str,
        content_disposition: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Grava objeto com metadados.

        Raises:
            BucketStorageError: Em qualquer falha de gravação.
        """
