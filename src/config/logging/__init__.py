"""Logging estruturado JSON do Spectro.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="spectro")
    logger = get_logger(__name__)
    logger.info("discord_message_created", extra={"latency_ms": 42})
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
