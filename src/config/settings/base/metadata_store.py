"""Settings do metadata store (mapeamento sha256 → asset_id).

O metadata store sustenta a deduplicação por conteúdo. Backend `none`
desliga a deduplicação sem ser erro.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

MetadataStoreBackend = Literal["memory", "redis", "none"]


@dataclass(frozen=True)
class MetadataStoreSettings:
    """Configurações do metadata store.

    Attributes:
        backend: Backend do store (memory|redis|none)
        key_prefix: Namespace das chaves no Redis
    """

    backend: MetadataStoreBackend = "memory"
    key_prefix: str = "media:sha256:"

    @property
    def enabled(self) -> bool:
        return self.backend != "none"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do metadata store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in {"memory", "redis", "none"}:
            errors.append(f"METADATA_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "METADATA_STORE_BACKEND=memory proibido em staging/production. "
                "Use Redis."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("METADATA_STORE_BACKEND=redis requer REDIS_URL configurado")

        if not self.key_prefix:
            errors.append("METADATA_STORE_KEY_PREFIX não pode ser vazio")

        return errors


def _load_metadata_store_from_env() -> MetadataStoreSettings:
    """Carrega MetadataStoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("METADATA_STORE_BACKEND", "memory").lower()
    backend: MetadataStoreBackend = (
        backend_str if backend_str in ("memory", "redis", "none") else "memory"
    )
    return MetadataStoreSettings(
        backend=backend,
        key_prefix=os.getenv("METADATA_STORE_KEY_PREFIX", "media:sha256:"),
    )


@lru_cache(maxsize=1)
def get_metadata_store_settings() -> MetadataStoreSettings:
    """Retorna instância cacheada de MetadataStoreSettings."""
    return _load_metadata_store_from_env()
