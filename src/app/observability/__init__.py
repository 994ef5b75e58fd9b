"""Observabilidade — correlation_id e métricas via logs estruturados."""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_rejection

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_rejection",
    "reset_correlation_id",
    "set_correlation_id",
]
