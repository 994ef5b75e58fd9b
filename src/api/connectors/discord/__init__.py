"""Conector Discord — adapter de borda para a API de interações.

Responsabilidades:
- Verificação Ed25519 do envelope do webhook
- HTTP client para a API REST (mensagens, callbacks de interação)
- Parsing dos erros da API
"""

from .discord_errors import DiscordApiError, parse_discord_error
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import DiscordHttpClient, create_discord_http_client
from .signature import DiscordSignatureVerifier, SignatureResult, load_public_key

__all__ = [
    "DiscordApiError",
    "DiscordHttpClient",
    "DiscordSignatureVerifier",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SignatureResult",
    "create_discord_http_client",
    "load_public_key",
    "parse_discord_error",
]
