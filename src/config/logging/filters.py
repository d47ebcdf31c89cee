"""Filters que enriquecem ou sanitizam records antes da formatação."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Identificadores longos que só aparecem truncados nos logs
TRUNCATED_FIELDS = frozenset({"pubkey", "uploader_pubkey", "sha256"})
# Nunca logados
REDACTED_FIELDS = frozenset({"authorization", "signature", "api_secret"})

_MAX_IDENTIFIER_LENGTH = 16
_REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Adiciona `correlation_id` e `service` a cada record.

    Um correlation_id passado explicitamente via `extra` tem precedência
    sobre o valor do getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldsFilter(logging.Filter):
    """Trunca pubkeys/hashes e remove credenciais vindas de `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in TRUNCATED_FIELDS:
            value = getattr(record, name, None)
            if isinstance(value, str) and len(value) > _MAX_IDENTIFIER_LENGTH:
                setattr(record, name, value[:8] + "...")
        for name in REDACTED_FIELDS:
            if getattr(record, name, None):
                setattr(record, name, _REDACTED)
        return True
