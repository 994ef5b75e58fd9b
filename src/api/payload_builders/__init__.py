"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- discord/: mensagens, embeds e botões da Discord API

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
