"""Entrypoint do serviço de importação de vídeo.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_async_redis_client
from app.services.background_tasks import drain_background_tasks
from config.logging import get_logger
from config.settings import get_metadata_store_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida configurações.
    Shutdown: aguarda gatilhos de thumbnail pendentes e fecha o Redis.
    """
    logger.info("app_starting", extra={"service": "importa-video"})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": "importa-video"})
    await drain_background_tasks(timeout_seconds=30.0)

    if get_metadata_store_settings().backend == "redis":
        redis_client = create_async_redis_client()
        await redis_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    CORS é respondido pelo próprio endpoint de importação (preflight 204
    e `Access-Control-Allow-Origin` em toda resposta).
    """
    fastapi_app = FastAPI(
        title="Importa Video",
        description="Importação de vídeos por URL com evento NIP-94",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "importa-video"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting importa-video in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
