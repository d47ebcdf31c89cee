"""Gatilho HTTP de pré-geração de thumbnail.

Pede o thumbnail médio do asset; o serviço de thumbnails gera sob demanda
quando ainda não existe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from config.settings.thumbnail import ThumbnailSettings

logger = logging.getLogger(__name__)


class HttpThumbnailTrigger:
    """Chama GET /thumbnail/{asset_id} no serviço de thumbnails."""

    def __init__(
        self,
        settings: ThumbnailSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def trigger(self, asset_id: str, base_url: str) -> bool:
        origin = self._settings.base_url or base_url.rstrip("/")
        url = f"{origin}/thumbnail/{asset_id}"
        params = {
            "size": self._settings.size,
            "timestamp": str(self._settings.timestamp_seconds),
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={"User-Agent": self._settings.user_agent},
                )
        except httpx.HTTPError as exc:
            logger.error(
                "thumbnail_trigger_failed",
                extra={"asset_id": asset_id, "error_type": type(exc).__name__},
            )
            return False

        if response.is_success:
            logger.info("thumbnail_trigger_completed", extra={"asset_id": asset_id})
            return True

        logger.warning(
            "thumbnail_trigger_rejected",
            extra={"asset_id": asset_id, "status_code": response.status_code},
        )
        return False
