"""Settings de autenticação NIP-98 (eventos Nostr assinados)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class AuthSettings:
    """Configurações da verificação NIP-98.

    Attributes:
        max_event_age_seconds: Janela aceita entre created_at e agora
        verify_url: Exige que a tag `u` bata com a URL da requisição
        verify_payload: Exige tag `payload` com sha256 do body
    """

    max_event_age_seconds: int = 60
    verify_url: bool = True
    verify_payload: bool = False

    def validate(self) -> list[str]:
        if self.max_event_age_seconds <= 0:
            return ["NIP98_MAX_EVENT_AGE_SECONDS deve ser > 0"]
        return []


def _load_auth_from_env() -> AuthSettings:
    """Carrega AuthSettings de variáveis de ambiente."""
    return AuthSettings(
        max_event_age_seconds=int(os.getenv("NIP98_MAX_EVENT_AGE_SECONDS", "60")),
        verify_url=os.getenv("NIP98_VERIFY_URL", "true").lower() in ("true", "1", "yes"),
        verify_payload=os.getenv("NIP98_VERIFY_PAYLOAD", "false").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Retorna instância cacheada de AuthSettings."""
    return _load_auth_from_env()
