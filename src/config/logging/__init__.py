"""Logging estruturado JSON do serviço de importação.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="importa_video")

    logger = get_logger(__name__)
    logger.info("url_import_started", extra={"host": "cdn.example"})

Todo log sai com: asctime, level, logger, message, correlation_id, service.
Campos `pubkey`/`sha256` são truncados e credenciais são removidas.
"""

from config.logging.config import NOISY_LOGGERS, configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, SensitiveFieldsFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "NOISY_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldsFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
