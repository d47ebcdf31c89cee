"""Protocolo do verificador de autenticação da requisição."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config.settings.media_import import DEFAULT_PLAN


@dataclass(frozen=True, slots=True)
class AuthResult:
    """Resultado da verificação.

    Attributes:
        valid: True se a prova é válida
        pubkey: Identidade do chamador (hex)
        plan: Plano extraído das claims da prova (padrão "free")
        error: Mensagem legível em caso de falha
        error_code: Código específico do verificador em caso de falha
    """

    valid: bool
    pubkey: str = ""
    plan: str = DEFAULT_PLAN
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def failure(cls, error_code: str, error: str) -> AuthResult:
        return cls(valid=False, error=error, error_code=error_code)


class AuthVerifierProtocol(Protocol):
    """Contrato mínimo para verificação da prova de autenticação."""

    async def verify(
        self,
        *,
        authorization: str | None,
        url: str,
        method: str,
        body: bytes,
    ) -> AuthResult: ...
