"""Cliente de upload de vídeo para o Cloudinary.

Upload assinado (SHA-1 sobre os parâmetros ordenados + api_secret) com
moderação e geração assíncrona de thumbnails quadrados.

Falhas nunca viram exceção: o chamador recebe `success=False` e decide
o fallback.
"""

from __future__ import annotations

import hashlib
import logging
import re
import time
from typing import TYPE_CHECKING

import httpx

from app.protocols.media_processor import ProcessorUploadResult

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from config.settings.cloudinary import CloudinarySettings

logger = logging.getLogger(__name__)

# Thumbnails quadrados gerados de forma assíncrona pelo Cloudinary
EAGER_TRANSFORMATIONS = "|".join(
    f"w_{size},h_{size},c_fill,q_auto,f_jpg" for size in (320, 640, 1280)
)

# Parâmetros que a API exclui da assinatura
UNSIGNED_PARAMS = frozenset({"file", "api_key", "resource_type", "cloud_name", "signature"})

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def build_public_id(folder: str, uploader_pubkey: str, timestamp: int, filename: str) -> str:
    """Caminho determinístico do objeto: pasta/pubkey[:16]/timestamp_nome."""
    stem = _EXTENSION_RE.sub("", filename)
    return f"{folder}/{uploader_pubkey[:16]}/{timestamp}_{stem}"


def sign_params(params: Mapping[str, object], api_secret: str) -> str:
    """Assinatura do Cloudinary: sha1("k1=v1&k2=v2..." + secret), chaves ordenadas."""
    to_sign = "&".join(
        f"{key}={params[key]}"
        for key in sorted(params)
        if key not in UNSIGNED_PARAMS and params[key] not in (None, "")
    )
    return hashlib.sha1((to_sign + api_secret).encode("utf-8")).hexdigest()


class CloudinaryClient:
    """Estratégia primária de persistência (processamento terceiro).

    Args:
        settings: CloudinarySettings
        transport: Transport httpx opcional (testes)
        clock: Fonte de tempo em segundos (testes)
    """

    def __init__(
        self,
        settings: CloudinarySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._clock = clock

    @property
    def enabled(self) -> bool:
        return self._settings.enabled

    def build_upload_params(self, *, filename: str, uploader_pubkey: str) -> dict[str, str]:
        """Parâmetros assinados do upload (inclui `signature` e `api_key`)."""
        timestamp = int(self._clock())
        params: dict[str, str] = {
            "timestamp": str(timestamp),
            "public_id": build_public_id(
                self._settings.folder, uploader_pubkey, timestamp, filename
            ),
            "moderation": self._settings.moderation,
            "eager": EAGER_TRANSFORMATIONS,
            "eager_async": "true",
            "context": f"pubkey={uploader_pubkey}|app={self._settings.folder}|source=url-import",
        }
        params["signature"] = sign_params(params, self._settings.api_secret)
        params["api_key"] = self._settings.api_key
        return params

    async def upload_video(
        self,
        *,
        content: bytes,
        filename: str,
        content_type: str,
        uploader_pubkey: str,
    ) -> ProcessorUploadResult:
        params = self.build_upload_params(filename=filename, uploader_pubkey=uploader_pubkey)
        started_at = time.perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._settings.upload_url,
                    data=params,
                    files={"file": (filename, content, content_type)},
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "cloudinary_upload_transport_failed",
                extra={"error_type": type(exc).__name__},
            )
            return ProcessorUploadResult(success=False, error=type(exc).__name__)

        elapsed_ms = round((time.perf_counter() - started_at) * 1000, 2)
        if not response.is_success:
            logger.warning(
                "cloudinary_upload_failed",
                extra={"status_code": response.status_code, "elapsed_ms": elapsed_ms},
            )
            return ProcessorUploadResult(success=False, error=f"http_{response.status_code}")

        try:
            data = response.json()
        except ValueError:
            return ProcessorUploadResult(success=False, error="invalid_response")

        secure_url = data.get("secure_url") if isinstance(data, dict) else None
        if not secure_url:
            return ProcessorUploadResult(success=False, error="missing_secure_url")

        logger.info(
            "cloudinary_upload_completed",
            extra={"public_id": data.get("public_id"), "elapsed_ms": elapsed_ms},
        )
        return ProcessorUploadResult(
            success=True,
            url=secure_url,
            public_id=data.get("public_id"),
            width=data.get("width"),
            height=data.get("height"),
        )
