"""Adapter dos builders para o protocolo usado pelo fluxo de confissões."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.discord.confession import (
    build_approved_log,
    build_confession_message,
    build_pending_log,
    build_resent_log,
)

if TYPE_CHECKING:
    from app.domain.confession import ChannelRecord, ConfessionRecord
    from app.domain.message import CreateMessage


class DiscordConfessionPayloadBuilder:
    """Monta mensagens a partir dos registros persistidos."""

    def confession_message(
        self,
        channel: ChannelRecord,
        confession: ConfessionRecord,
        reply_to_message_id: int | None = None,
    ) -> CreateMessage:
        return build_confession_message(
            timestamp=confession.created_at,
            confession_id=confession.confession_id,
            label=channel.label,
            description=confession.content,
            color=channel.color,
            reply_to_message_id=reply_to_message_id,
            attachment=confession.attachment,
        )

    def pending_log(self, channel: ChannelRecord, confession: ConfessionRecord) -> CreateMessage:
        return build_pending_log(
            timestamp=confession.created_at,
            internal_id=confession.internal_id,
            confession_id=confession.confession_id,
            author_id=confession.author_id,
            label=channel.label,
            description=confession.content,
            attachment=confession.attachment,
        )

    def approved_log(self, channel: ChannelRecord, confession: ConfessionRecord) -> CreateMessage:
        return build_approved_log(
            timestamp=confession.created_at,
            confession_id=confession.confession_id,
            author_id=confession.author_id,
            label=channel.label,
            description=confession.content,
            attachment=confession.attachment,
        )

    def resent_log(
        self,
        channel: ChannelRecord,
        confession: ConfessionRecord,
        moderator_id: int,
    ) -> CreateMessage:
        return build_resent_log(
            timestamp=confession.created_at,
            confession_id=confession.confession_id,
            author_id=confession.author_id,
            moderator_id=moderator_id,
            label=channel.label,
            description=confession.content,
            attachment=confession.attachment,
        )
