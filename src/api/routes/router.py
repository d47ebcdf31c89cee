"""Montagem das rotas HTTP do serviço.

    /health, /ready          liveness e readiness (raiz, exigido pelo Cloud Run)
    /api/import-url          importação de vídeo por URL
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.media.router import router as media_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Router raiz com health na raiz e mídia sob `/api`."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(media_router, prefix=API_PREFIX, tags=["media"])
    return api_router
