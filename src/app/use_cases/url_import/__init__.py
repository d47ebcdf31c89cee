"""Use case de importação de vídeo por URL."""

from .import_video_from_url import (
    MESSAGE_ALREADY_EXISTS,
    MESSAGE_IMPORTED,
    ImportContext,
    ImportVideoFromUrlUseCase,
)

__all__ = [
    "MESSAGE_ALREADY_EXISTS",
    "MESSAGE_IMPORTED",
    "ImportContext",
    "ImportVideoFromUrlUseCase",
]
