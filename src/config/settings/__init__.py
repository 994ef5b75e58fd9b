"""Agregador de settings do Spectro.

Re-exporta as settings e funções de cada módulo.
Apenas o composition root (app/bootstrap) chama os getters; os
componentes recebem as settings já construídas.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.discord import (
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DiscordSettings,
    get_discord_settings,
)

__all__ = [
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    "BaseSettings",
    "DiscordSettings",
    "Environment",
    "get_base_settings",
    "get_discord_settings",
]
