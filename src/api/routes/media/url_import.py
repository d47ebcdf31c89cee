"""Endpoint de importação de vídeo por URL.

Endpoints:
- OPTIONS /api/import-url: preflight CORS (204)
- POST /api/import-url: importa o vídeo e devolve o evento NIP-94

Toda resposta carrega `Access-Control-Allow-Origin: *`; o endpoint é
chamado direto do navegador por clientes Nostr.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.bootstrap import get_import_use_case_provider
from app.domain.import_errors import ServerError, UrlImportError
from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.use_cases.url_import import ImportContext, ImportVideoFromUrlUseCase
from config.settings import get_base_settings

if TYPE_CHECKING:
    from app.domain.url_import import ImportOutcome

logger = logging.getLogger(__name__)

router = APIRouter()

IMPORT_URL_PATH = "/import-url"

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}


def _public_origin(request: Request) -> str:
    """Origem usada nas URLs de mídia e na checagem da tag `u`."""
    configured = get_base_settings().public_base_url
    if configured:
        return configured
    return f"{request.url.scheme}://{request.url.netloc}"


def _success_response(outcome: ImportOutcome) -> JSONResponse:
    return JSONResponse(
        content=outcome.to_response(),
        status_code=status.HTTP_200_OK,
        headers=CORS_HEADERS,
    )


def _error_response(exc: UrlImportError) -> JSONResponse:
    return JSONResponse(
        content=exc.to_payload(),
        status_code=exc.status_code,
        headers=CORS_HEADERS,
    )


@router.options(IMPORT_URL_PATH)
async def import_url_preflight() -> Response:
    """Preflight CORS: sem corpo."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=PREFLIGHT_HEADERS)


@router.post(IMPORT_URL_PATH, response_model=None)
async def import_url(
    request: Request,
    use_case_provider: Annotated[
        Callable[[], ImportVideoFromUrlUseCase], Depends(get_import_use_case_provider)
    ],
) -> JSONResponse:
    """Importa um vídeo remoto.

    Body: `{"url": "...", "caption"?: "...", "alt"?: "...", "useCloudinary"?: bool}`
    Header: `Authorization: Nostr <base64 do evento NIP-98>`

    Returns:
        200 com `status=success` ou erro `{status, message, code}`
        (401 para autenticação, 400 para o restante).
    """
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        origin = _public_origin(request)
        context = ImportContext(
            body=await request.body(),
            authorization=request.headers.get("authorization"),
            request_url=f"{origin}{request.url.path}",
            method=request.method,
            origin=origin,
        )

        try:
            use_case = use_case_provider()
        except Exception:
            logger.exception("import_use_case_unavailable")
            return _error_response(ServerError("Internal server error"))

        try:
            outcome = await use_case.execute(context)
        except UrlImportError as exc:
            logger.info(
                "import_url_request_failed",
                extra={"code": exc.code, "status_code": exc.status_code},
            )
            return _error_response(exc)

        logger.info(
            "import_url_request_completed",
            extra={
                "asset_id": outcome.asset_id,
                "storage": outcome.storage,
                "correlation_id": get_correlation_id(),
            },
        )
        return _success_response(outcome)
    finally:
        reset_correlation_id(token)
