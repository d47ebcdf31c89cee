"""Erros tipados da importação de vídeo por URL.

Cada variante carrega seu próprio `code` e `status_code`; a borda HTTP
serializa todas no mesmo formato `{status, message, code}`.
"""

from __future__ import annotations

from typing import Any


class UrlImportError(Exception):
    """Base fechada dos erros visíveis ao cliente."""

    code: str = "server_error"
    status_code: int = 400

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_payload(self) -> dict[str, Any]:
        return {"status": "error", "message": self.message, "code": self.code}


class AuthError(UrlImportError):
    """Prova de autenticação ausente ou inválida.

    O `code` é o código específico devolvido pelo verificador.
    """

    status_code = 401

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message, code=code)


class BadRequestError(UrlImportError):
    """Body malformado, `url` ausente ou inválida."""

    code = "invalid_request"


class UpstreamFetchError(UrlImportError):
    """Servidor remoto falhou ou respondeu status não-2xx."""

    code = "fetch_failed"

    def __init__(self, message: str, *, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class UnsupportedMediaTypeError(UrlImportError):
    """Combinação content-type + extensão não reconhecida como vídeo."""

    code = "invalid_file_type"

    def __init__(self, content_type: str, extension: str, url: str) -> None:
        super().__init__(
            f"Content type {content_type} not supported for URL {url} (extension: {extension or 'none'})"
        )
        self.content_type = content_type
        self.extension = extension


class PayloadTooLargeError(UrlImportError):
    """Tamanho declarado ou real excede o teto do plano."""

    code = "file_too_large"

    def __init__(self, actual_bytes: int, allowed_bytes: int) -> None:
        super().__init__(f"File size {actual_bytes} exceeds limit of {allowed_bytes} bytes")
        self.actual_bytes = actual_bytes
        self.allowed_bytes = allowed_bytes


class ServerError(UrlImportError):
    """Falha inesperada normalizada na borda do caso de uso."""

    code = "server_error"
