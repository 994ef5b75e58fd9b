"""Protocolo da persistência de canais e confissões.

A alocação do número público da confissão é responsabilidade da
implementação (transacional em banco, lock em memória).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.confession import ChannelRecord, ConfessionRecord, ExternalChannelReference
    from app.domain.message import EmbedAttachment


class ConfessionStoreProtocol(Protocol):
    """Contrato assíncrono para a camada de persistência."""

    async def get_channel(self, channel_id: int) -> ChannelRecord | None: ...

    async def create_confession(
        self,
        *,
        channel_id: int,
        author_id: int,
        content: str,
        created_at: datetime,
        approved: bool,
        attachment: EmbedAttachment | None = None,
    ) -> ConfessionRecord:
        """Incrementa o contador do canal e persiste a confissão."""
        ...

    async def get_confession(self, internal_id: int) -> ConfessionRecord | None: ...

    async def approve_confession(self, internal_id: int, approved_at: datetime) -> bool:
        """Marca como aprovada. Retorna False se já estava aprovada."""
        ...

    async def delete_confession(self, internal_id: int) -> bool: ...

    async def set_log_reference(
        self,
        internal_id: int,
        reference: ExternalChannelReference,
    ) -> None: ...
