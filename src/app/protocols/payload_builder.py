"""Protocolo de construção das mensagens de confissão."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.confession import ChannelRecord, ConfessionRecord
    from app.domain.message import CreateMessage


class ConfessionPayloadBuilderProtocol(Protocol):
    """Contrato mínimo para montar mensagens públicas e logs."""

    def confession_message(
        self,
        channel: ChannelRecord,
        confession: ConfessionRecord,
        reply_to_message_id: int | None = None,
    ) -> CreateMessage: ...

    def pending_log(self, channel: ChannelRecord, confession: ConfessionRecord) -> CreateMessage: ...

    def approved_log(self, channel: ChannelRecord, confession: ConfessionRecord) -> CreateMessage: ...

    def resent_log(
        self,
        channel: ChannelRecord,
        confession: ConfessionRecord,
        moderator_id: int,
    ) -> CreateMessage: ...
