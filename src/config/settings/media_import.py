"""Settings da importação de vídeo por URL.

Limites de tamanho por plano, identificação do bot e timeouts de download.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PLAN = "free"

_MB = 1024 * 1024


@dataclass(frozen=True)
class MediaImportSettings:
    """Configurações do pipeline de importação.

    Attributes:
        max_bytes_free: Teto de tamanho para o plano free
        max_bytes_pro: Teto de tamanho para o plano pro
        user_agent: User-Agent enviado ao servidor remoto
        fetch_timeout_seconds: Timeout do download remoto
        media_path_prefix: Prefixo de rota pública dos assets
    """

    max_bytes_free: int = 100 * _MB
    max_bytes_pro: int = 1024 * _MB
    user_agent: str = "ImportaVideo/1.0 (Video Import Bot)"
    fetch_timeout_seconds: float = 60.0
    media_path_prefix: str = "/media/"

    def max_size_for_plan(self, plan: str | None) -> int:
        """Retorna teto em bytes para o plano; planos desconhecidos caem em free."""
        if (plan or DEFAULT_PLAN).lower() == "pro":
            return self.max_bytes_pro
        return self.max_bytes_free

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.max_bytes_free <= 0:
            errors.append("IMPORT_MAX_BYTES_FREE deve ser > 0")
        if self.max_bytes_pro < self.max_bytes_free:
            errors.append("IMPORT_MAX_BYTES_PRO deve ser >= IMPORT_MAX_BYTES_FREE")
        if self.fetch_timeout_seconds <= 0:
            errors.append("IMPORT_FETCH_TIMEOUT_SECONDS deve ser > 0")
        if not self.media_path_prefix.startswith("/") or not self.media_path_prefix.endswith("/"):
            errors.append("IMPORT_MEDIA_PATH_PREFIX deve começar e terminar com /")
        return errors


def _load_media_import_from_env() -> MediaImportSettings:
    """Carrega MediaImportSettings de variáveis de ambiente."""
    return MediaImportSettings(
        max_bytes_free=int(os.getenv("IMPORT_MAX_BYTES_FREE", str(100 * _MB))),
        max_bytes_pro=int(os.getenv("IMPORT_MAX_BYTES_PRO", str(1024 * _MB))),
        user_agent=os.getenv("IMPORT_USER_AGENT", "ImportaVideo/1.0 (Video Import Bot)"),
        fetch_timeout_seconds=float(os.getenv("IMPORT_FETCH_TIMEOUT_SECONDS", "60")),
        media_path_prefix=os.getenv("IMPORT_MEDIA_PATH_PREFIX", "/media/"),
    )


@lru_cache(maxsize=1)
def get_media_import_settings() -> MediaImportSettings:
    """Retorna instância cacheada de MediaImportSettings."""
    return _load_media_import_from_env()
