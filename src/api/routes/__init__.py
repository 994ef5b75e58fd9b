"""Rotas HTTP da API — adapters de entrada por canal.

Responsabilidades:
- Definir endpoints HTTP (webhook de interações, health)
- Validação inicial de request (headers de assinatura)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura por canal:
- routes/discord/: webhook de interações Discord
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
