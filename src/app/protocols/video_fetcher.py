"""Protocolo do download de vídeo remoto.

O download é aberto em duas fases: headers primeiro (para validar
content-type e tamanho declarado) e body depois, via `read()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping
    from contextlib import AbstractAsyncContextManager


class RemoteVideoProtocol(Protocol):
    """Resposta remota com body ainda não lido."""

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def is_success(self) -> bool: ...

    async def read(self) -> bytes: ...


class VideoFetcherProtocol(Protocol):
    """Abre a resposta remota para a URL.

    Raises:
        RemoteFetchError: Falha de transporte (DNS, conexão, timeout).
    """

    def open(self, url: str) -> AbstractAsyncContextManager[RemoteVideoProtocol]: ...
