"""Formatter JSON (python-json-logger) usado por todos os handlers."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em toda linha de log
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Nomes curtos esperados pelo Cloud Logging
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Formatter com campos fixos; campos de `extra` entram no mesmo objeto.

    Exemplo:
        {"asctime": "2026-02-02T10:30:00+0000", "correlation_id": "abc-123",
         "level": "INFO", "logger": "app.use_cases.url_import.import_video_from_url",
         "message": "url_import_completed", "service": "importa_video",
         "asset_id": "1700000000000-3fa9c2d1", "storage": "bucket"}
    """
    fields = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        fields,
        rename_fields=FIELD_RENAME_MAP,
        datefmt=ISO_DATE_FORMAT,
        json_ensure_ascii=False,
    )
