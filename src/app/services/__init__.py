"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (IO apenas via protocolos injetados).
Implementações concretas de IO ficam em app/infra/ e api/connectors/.
"""

from app.services.confession_service import ConfessionService

__all__ = [
    "ConfessionService",
]
