"""Serviços de aplicação.

Unidades reutilizáveis de política e agendamento (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.background_tasks import drain_background_tasks, schedule_background_task
from app.services.media_policy import (
    get_file_extension,
    is_valid_video_content,
    normalize_content_type,
    resolve_content_type,
)

__all__ = [
    "drain_background_tasks",
    "get_file_extension",
    "is_valid_video_content",
    "normalize_content_type",
    "resolve_content_type",
    "schedule_background_task",
]
