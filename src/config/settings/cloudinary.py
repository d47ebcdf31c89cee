"""Settings do Cloudinary (processamento, moderação e thumbnails).

A estratégia primária só é usada quando `api_key` está configurada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

CLOUDINARY_API_BASE_URL = "https://api.cloudinary.com/v1_1"


@dataclass(frozen=True)
class CloudinarySettings:
    """Configurações do Cloudinary.

    Attributes:
        cloud_name: Nome da cloud (compõe a URL de upload)
        api_key: Chave pública da API
        api_secret: Secret usado na assinatura (nunca logar)
        folder: Pasta raiz dos uploads
        moderation: Add-on de moderação aplicado ao vídeo
        request_timeout_seconds: Timeout do upload
    """

    cloud_name: str = ""
    api_key: str = ""
    api_secret: str = ""
    folder: str = "importa-video"
    moderation: str = "aws_rek_video"
    request_timeout_seconds: float = 120.0
    api_base_url: str = CLOUDINARY_API_BASE_URL

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    @property
    def upload_url(self) -> str:
        return f"{self.api_base_url}/{self.cloud_name}/video/upload"

    def validate(self) -> list[str]:
        """Valida configurações do Cloudinary (só quando habilitado)."""
        if not self.enabled:
            return []
        errors: list[str] = []
        if not self.cloud_name:
            errors.append("CLOUDINARY_CLOUD_NAME requerido quando CLOUDINARY_API_KEY está definido")
        if not self.api_secret:
            errors.append("CLOUDINARY_API_SECRET requerido quando CLOUDINARY_API_KEY está definido")
        return errors


def _load_cloudinary_from_env() -> CloudinarySettings:
    """Carrega CloudinarySettings de variáveis de ambiente."""
    return CloudinarySettings(
        cloud_name=os.getenv("CLOUDINARY_CLOUD_NAME", ""),
        api_key=os.getenv("CLOUDINARY_API_KEY", ""),
        api_secret=os.getenv("CLOUDINARY_API_SECRET", ""),
        folder=os.getenv("CLOUDINARY_FOLDER", "importa-video"),
        moderation=os.getenv("CLOUDINARY_MODERATION", "aws_rek_video"),
        request_timeout_seconds=float(os.getenv("CLOUDINARY_TIMEOUT_SECONDS", "120")),
    )


@lru_cache(maxsize=1)
def get_cloudinary_settings() -> CloudinarySettings:
    """Retorna instância cacheada de CloudinarySettings."""
    return _load_cloudinary_from_env()
