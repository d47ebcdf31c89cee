"""Política de tipo de mídia para importação de vídeo.

Servidores de objetos (GCS, S3) frequentemente devolvem content-type
genérico para vídeos. A política aceita o tipo genérico quando a extensão
da URL identifica um formato de vídeo conhecido, e corrige o MIME a partir
dela.
"""

from __future__ import annotations

import posixpath
from urllib.parse import unquote, urlsplit

# Tipo assumido quando o servidor remoto não envia content-type
DEFAULT_CONTENT_TYPE = "video/mp4"

EXTENSION_MIME_TYPES: dict[str, str] = {
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".mov": "video/quicktime",
}

SUPPORTED_VIDEO_TYPES = frozenset(EXTENSION_MIME_TYPES.values())

GENERIC_BINARY_TYPES = frozenset(
    {
        "application/octet-stream",
        "application/binary",
        "binary/octet-stream",
    }
)


def get_file_extension(url: str) -> str:
    """Extensão do path da URL em minúsculas (ex: ".mp4"), ou vazio."""
    path = unquote(urlsplit(url).path)
    _, extension = posixpath.splitext(posixpath.basename(path))
    return extension.lower()


def normalize_content_type(header_value: str | None) -> str:
    """Remove parâmetros (`; charset=...`) e normaliza caixa."""
    if not header_value:
        return DEFAULT_CONTENT_TYPE
    media_type = header_value.split(";", 1)[0].strip().lower()
    return media_type or DEFAULT_CONTENT_TYPE


def is_generic_binary(content_type: str) -> bool:
    return content_type in GENERIC_BINARY_TYPES


def is_valid_video_content(url: str, content_type: str) -> bool:
    """Valida content-type declarado em conjunto com a extensão da URL."""
    if content_type in SUPPORTED_VIDEO_TYPES:
        return True
    if is_generic_binary(content_type):
        return get_file_extension(url) in EXTENSION_MIME_TYPES
    return False


def resolve_content_type(url: str, content_type: str) -> str:
    """Corrige tipo genérico a partir da extensão; extensões desconhecidas mantêm o genérico."""
    if not is_generic_binary(content_type):
        return content_type
    return EXTENSION_MIME_TYPES.get(get_file_extension(url), content_type)
