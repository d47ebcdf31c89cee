"""Protocolo do metadata store (sha256 → asset_id).

Interface leve (ABC) dependida pelo caso de uso de importação.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class MetadataStoreProtocol(ABC):
    """Contrato assíncrono do mapeamento de deduplicação.

    Invariante: cada hash aponta para no máximo um asset_id canônico;
    o primeiro escritor vence.
    """

    @abstractmethod
    async def get_asset_id(self, sha256: str) -> str | None:
        """Retorna asset_id já registrado para o hash, ou None."""

    @abstractmethod
    async def set_asset_id(self, sha256: str, asset_id: str) -> bool:
        """Registra o mapeamento se ainda não existir.

        Returns:
            True se gravou agora; False se outro asset já era dono do hash.
        """
