"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.confession import ExternalChannelReference
    from app.domain.message import CreateMessage


class DiscordApiErrorProtocol(Protocol):
    status_code: int
    code: int
    message: str


class DiscordHttpClientProtocol(Protocol):
    """Contrato mínimo para criar mensagens no Discord."""

    async def create_message(
        self,
        channel_id: int,
        message: CreateMessage,
    ) -> ExternalChannelReference | DiscordApiErrorProtocol: ...
