"""Protocolo do gatilho de pré-geração de thumbnail."""

from __future__ import annotations

from typing import Protocol


class ThumbnailTriggerProtocol(Protocol):
    """Dispara a geração de thumbnail de um asset (fire-and-forget)."""

    async def trigger(self, asset_id: str, base_url: str) -> bool: ...
