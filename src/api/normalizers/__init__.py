"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- discord/: decoder das interações do Discord
"""

from .discord import InteractionValidationError, decode_interaction

__all__ = [
    "InteractionValidationError",
    "decode_interaction",
]
