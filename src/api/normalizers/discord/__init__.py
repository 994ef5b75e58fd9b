"""Normalizer Discord: JSON de interação → variantes tipadas."""

from .decoder import InteractionValidationError, decode_interaction

__all__ = [
    "InteractionValidationError",
    "decode_interaction",
]
