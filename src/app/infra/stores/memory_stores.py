"""Store de confissões em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import replace
from typing import TYPE_CHECKING

from app.domain.confession import ChannelRecord, ConfessionRecord
from app.protocols.confession_store import ConfessionStoreProtocol
from utils.errors import ChannelNotConfiguredError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from app.domain.confession import ExternalChannelReference
    from app.domain.message import EmbedAttachment


class MemoryConfessionStore(ConfessionStoreProtocol):
    """Canais e confissões em dicts; contador por canal protegido por lock."""

    def __init__(self, channels: Iterable[ChannelRecord] = ()) -> None:
        self._channels: dict[int, ChannelRecord] = {c.id: c for c in channels}
        self._confessions: dict[int, ConfessionRecord] = {}
        self._internal_ids = itertools.count(1)
        self._lock = asyncio.Lock()

    def add_channel(self, channel: ChannelRecord) -> None:
        """Registra/atualiza um canal (setup feito fora do fluxo de interação)."""
        self._channels[channel.id] = channel

    async def get_channel(self, channel_id: int) -> ChannelRecord | None:
        channel = self._channels.get(channel_id)
        # Cópia: chamadores não alteram o estado interno
        return replace(channel) if channel is not None else None

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
        async with self._lock:
            channel = self._channels.get(channel_id)
            if channel is None:
                raise ChannelNotConfiguredError()
            channel.last_confession_id += 1
            confession = ConfessionRecord(
                internal_id=next(self._internal_ids),
                channel_id=channel_id,
                confession_id=channel.last_confession_id,
                author_id=author_id,
                content=content,
                created_at=created_at,
                approved_at=created_at if approved else None,
                attachment=attachment,
            )
            self._confessions[confession.internal_id] = confession
            return replace(confession)

    async def get_confession(self, internal_id: int) -> ConfessionRecord | None:
        confession = self._confessions.get(internal_id)
        return replace(confession) if confession is not None else None

    async def approve_confession(self, internal_id: int, approved_at: datetime) -> bool:
        async with self._lock:
            confession = self._confessions.get(internal_id)
            if confession is None or confession.is_approved:
                return False
            confession.approved_at = approved_at
            return True

    async def delete_confession(self, internal_id: int) -> bool:
        async with self._lock:
            return self._confessions.pop(internal_id, None) is not None

    async def set_log_reference(
        self,
        internal_id: int,
        reference: ExternalChannelReference,
    ) -> None:
        confession = self._confessions.get(internal_id)
        if confession is not None:
            confession.log_reference = reference
