"""Redis Metadata Store: mapeamento sha256 → asset_id com Upstash Redis.

Usa SET NX (set if not exists) para que o primeiro import de um conteúdo
seja o dono canônico do hash, mesmo com imports concorrentes.

Contrato de Keys:
    As keys são hashes SHA-256 hex do conteúdo; são logadas truncadas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.metadata_store import MetadataStoreProtocol
from utils.errors import MetadataStoreError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo padrão do namespace de hashes
METADATA_PREFIX = "media:sha256:"


def _mask(sha256: str) -> str:
    return sha256[:8] + "..." if len(sha256) > 8 else sha256


class RedisMetadataStore(MetadataStoreProtocol):
    """Metadata store usando Redis assíncrono (Upstash compatível).

    Args:
        redis_client: Cliente Redis assíncrono
        key_prefix: Namespace das chaves
    """

    def __init__(
        self,
        redis_client: AsyncRedis[bytes],
        key_prefix: str = METADATA_PREFIX,
    ) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, sha256: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{sha256}"

    async def get_asset_id(self, sha256: str) -> str | None:
        """Busca asset_id do hash.

        Raises:
            MetadataStoreError: Falha de conexão/timeout.
        """
        try:
            value = await self._redis.get(self._key(sha256))
        except Exception as exc:
            raise MetadataStoreError("Falha ao consultar hash no Redis") from exc

        if value is None:
            return None
        asset_id = value.decode("utf-8") if isinstance(value, bytes) else str(value)
        logger.debug("metadata_hash_found", extra={"sha256": _mask(sha256)})
        return asset_id

    async def set_asset_id(self, sha256: str, asset_id: str) -> bool:
        """Registra hash → asset_id se ainda não existir (SET NX).

        Raises:
            MetadataStoreError: Falha de conexão/timeout.
        """
        try:
            was_set = await self._redis.set(self._key(sha256), asset_id, nx=True)
        except Exception as exc:
            raise MetadataStoreError("Falha ao gravar hash no Redis") from exc

        if not was_set:
            logger.info(
                "metadata_hash_already_owned",
                extra={"sha256": _mask(sha256), "asset_id": asset_id},
            )
        return bool(was_set)

    async def ping(self) -> bool:
        """Usado pelo readiness check."""
        try:
            return bool(await self._redis.ping())
        except Exception as exc:
            raise MetadataStoreError("Falha ao pingar Redis") from exc
