"""Filter que injeta correlation_id e service em cada record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Completa o record com o contexto da interação em andamento.

    Um `correlation_id` passado via `extra` prevalece sobre o do getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self._service_name
        return True
