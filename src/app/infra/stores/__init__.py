"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: store de confissões em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryConfessionStore

__all__ = [
    "MemoryConfessionStore",
]
