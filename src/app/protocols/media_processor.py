"""Protocolo do serviço terceiro de processamento de mídia."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ProcessorUploadResult:
    """Resultado do upload; falhas nunca viram exceção."""

    success: bool
    url: str | None = None
    public_id: str | None = None
    width: int | None = None
    height: int | None = None
    error: str | None = None


class MediaProcessorProtocol(Protocol):
    """Upload para processamento, moderação e geração de derivados."""

    async def upload_video(
        self,
        *,
        content: bytes,
        filename: str,
        content_type: str,
        uploader_pubkey: str,
    ) -> ProcessorUploadResult: ...
