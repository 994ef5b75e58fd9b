"""Helpers de logging para a API Discord (sem tokens nem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .discord_errors import DiscordApiError

logger = logging.getLogger(__name__)


def log_discord_error(
    error: DiscordApiError,
    operation: str,
    latency_ms: float,
) -> None:
    """Loga erro da API com código numérico e latência."""
    logger.error(
        "discord_api_error",
        extra={
            "operation": operation,
            "status_code": error.status_code,
            "error_code": error.code,
            "error_message": error.message,
            "is_retryable": error.is_retryable,
            "latency_ms": round(latency_ms, 2),
        },
    )


def log_success(
    operation: str,
    status_code: int,
    latency_ms: float,
) -> None:
    logger.info(
        "discord_api_success",
        extra={
            "operation": operation,
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
        },
    )
