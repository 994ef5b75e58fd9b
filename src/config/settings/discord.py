"""Settings específicas de Discord.

Configurações do canal Discord (interações via webhook + REST API).
Credenciais são lidas uma vez no startup; rotação não é suportada.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Discord API
DISCORD_API_VERSION: str = "v10"
DISCORD_API_BASE_URL: str = "https://discord.com/api"

_PUBLIC_KEY_REGEX = re.compile(r"^[0-9a-fA-F]{64}$")


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        bot_token: Token do bot (header Authorization: Bot ...)
        application_id: ID da aplicação Discord
        public_key: Chave pública Ed25519 (hex) para verificar interações
        api_version: Versão da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout imposto às chamadas REST
    """

    # Credenciais
    bot_token: str = ""
    application_id: str = ""
    public_key: str = ""

    # API
    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL

    # O token de callback expira em segundos, então o timeout é curto
    request_timeout_seconds: float = 2.5

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("DISCORD_BOT_TOKEN não configurado")

        if not self.application_id:
            errors.append("DISCORD_APPLICATION_ID não configurado")

        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif not _PUBLIC_KEY_REGEX.match(self.public_key):
            errors.append("DISCORD_PUBLIC_KEY deve ter 64 caracteres hexadecimais")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
        application_id=os.getenv("DISCORD_APPLICATION_ID", ""),
        public_key=os.getenv("DISCORD_PUBLIC_KEY", ""),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "2.5")
        ),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
