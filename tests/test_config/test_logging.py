"""Testes para config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    NOISY_LOGGERS,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldsFilter,
    configure_logging,
    create_json_formatter,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "url_import_started") -> logging.LogRecord:
    return logging.LogRecord(
        name="app.use_cases.url_import",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(level="warning")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="LOUD")

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "importa_video"


class TestLogFallback:
    def test_logs_warning_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "cloudinary_upload", reason="http_500", elapsed_ms=12.5)

        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        assert args == ("Fallback applied for %s", "cloudinary_upload")
        assert kwargs["extra"] == {
            "fallback_used": True,
            "component": "cloudinary_upload",
            "reason": "http_500",
            "elapsed_ms": 12.5,
        }

    def test_optional_fields_are_omitted(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "cloudinary_upload")

        extra = logger.warning.call_args[1]["extra"]
        assert "reason" not in extra
        assert "elapsed_ms" not in extra


class TestCorrelationIdFilter:
    def test_injects_correlation_id_and_service(self) -> None:
        record = _record()

        assert CorrelationIdFilter("importa_video", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "importa_video"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


def test_json_formatter_emits_required_fields() -> None:
    record = _record("url_import_completed")
    record.correlation_id = "abc-123"
    record.service = "importa_video"

    payload = json.loads(create_json_formatter().format(record))

    assert payload["message"] == "url_import_completed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.use_cases.url_import"
    assert payload["correlation_id"] == "abc-123"
    assert payload["service"] == "importa_video"
    assert {"asctime", "correlation_id", "service", "message"} <= REQUIRED_LOG_FIELDS


def test_configure_logging_quiets_http_libraries() -> None:
    configure_logging(level="INFO")
    assert all(logging.getLogger(name).level == logging.WARNING for name in NOISY_LOGGERS)

    configure_logging(level="DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG


class TestSensitiveFieldsFilter:
    def test_truncates_long_identifiers(self) -> None:
        record = _record()
        record.pubkey = "a" * 64
        record.sha256 = "short"

        assert SensitiveFieldsFilter().filter(record) is True
        assert record.pubkey == "aaaaaaaa..."
        assert record.sha256 == "short"

    def test_redacts_credentials(self) -> None:
        record = _record()
        record.authorization = "Nostr eyJ..."

        SensitiveFieldsFilter().filter(record)

        assert record.authorization == "[redacted]"
