"""Métricas registradas como logs estruturados.

Latência das chamadas REST ao Discord é relevante para correção: o token
de callback expira em poucos segundos.

Uso:
    start = time.perf_counter()
    ...
    record_latency("discord_api", "create_message", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
    status_code: int | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "discord_api")
        operation: Nome da operação (ex: "create_message")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (o filter injeta o atual se None)
        status_code: Status HTTP quando a operação é uma chamada REST
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    if status_code is not None:
        extra["status_code"] = status_code

    logger.info("metric_latency", extra=extra)


def record_rejection(
    reason: str,
    correlation_id: str | None = None,
) -> None:
    """Registra webhook rejeitado (400/401) como possível sinal de abuso."""
    extra: dict[str, object] = {
        "metric_type": "rejection",
        "component": "interaction_webhook",
        "reason": reason,
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id

    logger.info("metric_rejection", extra=extra)
