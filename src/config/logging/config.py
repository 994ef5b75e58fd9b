"""Configuração centralizada de logging.

Todo log sai em JSON com correlation_id e service. Nunca registrar conteúdo
de confissões, tokens de bot ou tokens de interação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "spectro"

# Em INFO o httpx registra a URL de cada request, e a URL do callback
# contém o token da interação.
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Chamada uma vez por app/bootstrap/. `correlation_id_getter` normalmente é
    o leitor do ContextVar de app/observability.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(logger: logging.Logger, component: str, reason: str | None = None) -> None:
    """Registra resposta degradada (callback genérico no lugar do resultado).

    `reason` é o nome da exceção ou um código, nunca conteúdo do usuário.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    logger.warning("Fallback applied for %s", component, extra=extra)
