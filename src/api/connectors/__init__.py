"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- discord/: verificação de assinatura e REST API do Discord

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
