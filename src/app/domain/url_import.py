"""Modelos de domínio da importação de vídeo por URL.

- ImportRequest: pedido do cliente (imutável após o parse)
- FetchedAsset: bytes baixados + atributos derivados (efêmero)
- Nip94Event / ImportOutcome: artefato de saída
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.import_errors import BadRequestError

NIP94_FILE_METADATA_KIND = 1063
# Todo vídeo do domínio é quadrado
FIXED_DIMENSIONS = "640x640"
DEFAULT_FILENAME = "imported-video.mp4"

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})


class ImportRequest(BaseModel):
    """Body do POST de importação."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    url: str = Field(..., min_length=1, description="URL absoluta http(s) do vídeo.")
    caption: str | None = Field(default=None, description="Legenda livre (content do evento).")
    alt: str | None = Field(default=None, description="Texto alternativo.")
    use_cloudinary: bool = Field(
        default=False,
        alias="useCloudinary",
        description="Solicita processamento/moderação via Cloudinary.",
    )

    @property
    def hostname(self) -> str:
        return urlsplit(self.url).hostname or ""

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def filename(self) -> str:
        """Último segmento do path ou nome padrão."""
        last_segment = unquote(self.path.rsplit("/", 1)[-1])
        return last_segment or DEFAULT_FILENAME


def parse_import_request(raw_body: bytes) -> ImportRequest:
    """Parseia e valida o body da importação.

    Raises:
        BadRequestError: JSON inválido, `url` ausente, URL não absoluta
            ou com esquema diferente de http/https.
    """
    try:
        payload = json.loads(raw_body or b"")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BadRequestError("Invalid JSON in request body") from exc

    if not isinstance(payload, dict):
        raise BadRequestError("Invalid JSON in request body")

    if not payload.get("url"):
        raise BadRequestError("URL parameter is required")

    try:
        request = ImportRequest.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError("Invalid request body") from exc

    if not is_valid_http_url(request.url):
        raise BadRequestError("Invalid URL provided")
    return request


def is_valid_http_url(value: str) -> bool:
    """True para URL absoluta com esquema http/https e host."""
    try:
        parts = urlsplit(value.strip())
        # porta fora de 0-65535 levanta ValueError
        hostname, _port = parts.hostname, parts.port
    except ValueError:
        return False
    return parts.scheme.lower() in ALLOWED_URL_SCHEMES and bool(hostname)


@dataclass(frozen=True, slots=True)
class FetchedAsset:
    """Vídeo baixado e validado; vive apenas durante uma importação."""

    content: bytes
    source_url: str
    filename: str
    declared_content_type: str
    declared_length: int | None
    content_type: str
    sha256: str

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class Nip94Event:
    """Evento de metadados de arquivo (kind 1063)."""

    tags: list[list[str]]
    content: str = ""
    kind: int = NIP94_FILE_METADATA_KIND

    def tag_value(self, name: str) -> str | None:
        for tag in self.tags:
            if tag and tag[0] == name:
                return tag[1] if len(tag) > 1 else ""
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
        }


def build_nip94_event(
    *,
    media_url: str,
    sha256: str,
    size: int,
    mime_type: str,
    request: ImportRequest,
) -> Nip94Event:
    """Monta o evento de saída; mesmo formato para import novo e duplicado."""
    alt = request.alt or f"Video imported from {request.hostname}"
    return Nip94Event(
        tags=[
            ["url", media_url],
            ["x", sha256],
            ["size", str(size)],
            ["m", mime_type],
            ["dim", FIXED_DIMENSIONS],
            ["alt", alt],
        ],
        content=request.caption or "",
    )


@dataclass(frozen=True, slots=True)
class ImportOutcome:
    """Resultado de sucesso da importação."""

    message: str
    media_url: str
    asset_id: str
    event: Nip94Event
    storage: str
    deduplicated: bool = False

    def to_response(self) -> dict[str, Any]:
        return {
            "status": "success",
            "message": self.message,
            "processing_url": self.media_url,
            "download_url": self.media_url,
            "nip94_event": self.event.to_dict(),
        }
