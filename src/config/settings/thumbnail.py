"""Settings do gatilho de pré-geração de thumbnails."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ThumbnailSettings:
    """Configurações do serviço de thumbnails.

    Attributes:
        enabled: Liga/desliga o gatilho pós-gravação
        base_url: Origem do serviço (vazio = mesma origem da requisição)
        size: Tamanho solicitado para pré-geração
        timestamp_seconds: Posição do frame no vídeo
        user_agent: User-Agent das chamadas internas
        request_timeout_seconds: Timeout da chamada
    """

    enabled: bool = True
    base_url: str = ""
    size: str = "medium"
    timestamp_seconds: int = 1
    user_agent: str = "ImportaVideo-Internal/1.0"
    request_timeout_seconds: float = 30.0


def _load_thumbnail_from_env() -> ThumbnailSettings:
    """Carrega ThumbnailSettings de variáveis de ambiente."""
    return ThumbnailSettings(
        enabled=os.getenv("THUMBNAIL_TRIGGER_ENABLED", "true").lower() in ("true", "1", "yes"),
        base_url=os.getenv("THUMBNAIL_BASE_URL", "").rstrip("/"),
        size=os.getenv("THUMBNAIL_SIZE", "medium"),
        timestamp_seconds=int(os.getenv("THUMBNAIL_TIMESTAMP_SECONDS", "1")),
        user_agent=os.getenv("THUMBNAIL_USER_AGENT", "ImportaVideo-Internal/1.0"),
        request_timeout_seconds=float(os.getenv("THUMBNAIL_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_thumbnail_settings() -> ThumbnailSettings:
    """Retorna instância cacheada de ThumbnailSettings."""
    return _load_thumbnail_from_env()
