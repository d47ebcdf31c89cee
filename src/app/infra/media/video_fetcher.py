"""Download de vídeo remoto via httpx (streaming de headers, body sob demanda)."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx

from utils.errors import RemoteFetchError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Mapping

logger = logging.getLogger(__name__)


class HttpRemoteVideo:
    """Resposta remota aberta; o body só é lido em `read()`."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    @property
    def is_success(self) -> bool:
        return self._response.is_success

    async def read(self) -> bytes:
        return await self._response.aread()


class HttpVideoFetcher:
    """Abre GET para a URL do vídeo seguindo redirects.

    Args:
        user_agent: User-Agent enviado ao servidor remoto
        timeout_seconds: Timeout de conexão/leitura
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        *,
        user_agent: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._user_agent = user_agent
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @asynccontextmanager
    async def open(self, url: str) -> AsyncIterator[HttpRemoteVideo]:
        async with httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                async with client.stream(
                    "GET",
                    url,
                    headers={"User-Agent": self._user_agent},
                ) as response:
                    yield HttpRemoteVideo(response)
            except httpx.HTTPError as exc:
                logger.warning(
                    "remote_fetch_transport_failed",
                    extra={"error_type": type(exc).__name__},
                )
                raise RemoteFetchError(f"Failed to fetch video: {type(exc).__name__}") from exc
