"""Settings do Google Cloud Storage.

Bucket onde os vídeos importados são gravados (estratégia direta).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class GCSSettings:
    """Configurações do Google Cloud Storage.

    Attributes:
        bucket_media: Bucket para vídeos importados
        object_prefix: Prefixo das chaves dos objetos
        backend: gcs (bucket real) ou memory (dev/test)
    """

    bucket_media: str = ""
    object_prefix: str = "uploads/"
    backend: str = "memory"

    def validate(self) -> list[str]:
        """Valida configurações do GCS.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.backend not in {"gcs", "memory"}:
            errors.append(f"BUCKET_BACKEND inválido: {self.backend}")
        if self.backend == "gcs" and not self.bucket_media:
            errors.append("BUCKET_BACKEND=gcs requer GCS_BUCKET_MEDIA configurado")
        return errors


def _load_gcs_from_env() -> GCSSettings:
    """Carrega GCSSettings de variáveis de ambiente."""
    return GCSSettings(
        bucket_media=os.getenv("GCS_BUCKET_MEDIA", ""),
        object_prefix=os.getenv("GCS_OBJECT_PREFIX", "uploads/"),
        backend=os.getenv("BUCKET_BACKEND", "memory").lower(),
    )


@lru_cache(maxsize=1)
def get_gcs_settings() -> GCSSettings:
    """Retorna instância cacheada de GCSSettings."""
    return _load_gcs_from_env()
