"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois
pelo sistema de logs (Cloud Logging, BigQuery).

Uso:
    from app.observability.metrics import record_latency

    start = time.perf_counter()
    # ... importação ...
    record_latency("url_import", "bucket", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "url_import")
        operation: Nome da operação (ex: "cloudinary", "bucket", "existing")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)
