"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_import_use_case

    # Na inicialização do serviço
    initialize_app()

    # Caso de uso pronto (singleton)
    use_case = get_import_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_cloudinary_settings,
    get_gcs_settings,
    get_media_import_settings,
    get_metadata_store_settings,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols import MetadataStoreProtocol
    from app.use_cases.url_import import ImportVideoFromUrlUseCase

# Nome do serviço para logs e métricas
SERVICE_NAME = "importa_video"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"metadata_store: {error}" for error in get_metadata_store_settings().validate(base)
    )
    errors.extend(f"gcs: {error}" for error in get_gcs_settings().validate())
    errors.extend(f"media_import: {error}" for error in get_media_import_settings().validate())
    errors.extend(f"cloudinary: {error}" for error in get_cloudinary_settings().validate())
    errors.extend(f"auth: {error}" for error in get_auth_settings().validate())

    if strict_mode and get_gcs_settings().backend != "gcs":
        errors.append("gcs: BUCKET_BACKEND=memory proibido em staging/production")

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_metadata_store() -> MetadataStoreProtocol | None:
    """Obtém metadata store (singleton); None quando dedupe desligado."""
    from app.bootstrap.dependencies import create_metadata_store

    return create_metadata_store()


@lru_cache(maxsize=1)
def get_import_use_case() -> ImportVideoFromUrlUseCase:
    """Obtém o caso de uso de importação (singleton).

    A rota recebe esta fábrica via `get_import_use_case_provider`.
    """
    from app.bootstrap.dependencies import create_import_use_case

    return create_import_use_case(metadata_store=get_metadata_store())


def get_import_use_case_provider() -> Callable[[], ImportVideoFromUrlUseCase]:
    """Dependency do FastAPI: entrega a fábrica do caso de uso.

    A rota constrói o caso de uso dentro do próprio tratamento de erro, para
    que falhas de wiring também saiam como `{status, message, code}` com CORS.
    Testes sobrescrevem via `app.dependency_overrides[get_import_use_case_provider]`.
    """
    return get_import_use_case
