"""Formatter JSON dos logs estruturados (python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# atributo do LogRecord -> chave no JSON
_LOG_FIELDS = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
    "message": "message",
    "correlation_id": "correlation_id",
    "service": "service",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter com as chaves fixas de todo log; `extra` entra como chave própria.

    Exemplo:
        {"timestamp": "...", "level": "INFO", "logger": "api.routes.discord.webhook",
         "message": "interaction_received", "correlation_id": "abc-123",
         "service": "spectro", "interaction_type": 1}
    """
    return JsonFormatter(
        " ".join(f"%({attribute})s" for attribute in _LOG_FIELDS),
        rename_fields={key: value for key, value in _LOG_FIELDS.items() if key != value},
    )
