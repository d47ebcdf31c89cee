"""Settings comuns do serviço: ambiente, origem pública e conexões."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações compartilhadas por todos os componentes.

    Attributes:
        environment: development | staging | production
        service_name: Identificador do serviço (health, tracing)
        debug: Liga respostas/logs de diagnóstico
        public_base_url: Origem pública das URLs de mídia e da tag `u`
            do NIP-98; vazio usa a origem da própria requisição
        gcp_project: Projeto GCP do bucket de mídia
        redis_url: Conexão do metadata store (Upstash)
    """

    environment: Environment = "development"
    service_name: str = "importa-video"
    debug: bool = False
    public_base_url: str = ""
    gcp_project: str = ""
    redis_url: str = ""

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Lista de erros de configuração (vazia = OK)."""
        errors: list[str] = []
        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.public_base_url and not self.public_base_url.startswith(("http://", "https://")):
            errors.append("PUBLIC_BASE_URL deve começar com http:// ou https://")
        return errors


def _parse_environment(raw: str) -> Environment:
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lidas do ambiente (cacheadas; `cache_clear()` em testes)."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "importa-video"),
        debug=os.getenv("DEBUG", "").lower() in _TRUTHY,
        public_base_url=os.getenv("PUBLIC_BASE_URL", "").rstrip("/"),
        gcp_project=os.getenv("GCP_PROJECT") or os.getenv("GOOGLE_CLOUD_PROJECT", ""),
        redis_url=os.getenv("REDIS_URL", ""),
    )
