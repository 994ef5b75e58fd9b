"""Protocolos e contratos do core da aplicação."""

from .confession_service import ConfessionServiceProtocol
from .confession_store import ConfessionStoreProtocol
from .http_client import DiscordApiErrorProtocol, DiscordHttpClientProtocol
from .payload_builder import ConfessionPayloadBuilderProtocol

__all__ = [
    "ConfessionPayloadBuilderProtocol",
    "ConfessionServiceProtocol",
    "ConfessionStoreProtocol",
    "DiscordApiErrorProtocol",
    "DiscordHttpClientProtocol",
]
