"""Fluxo de confissões: envio, revisão pendente, publicação, remoção e reenvio.

Implementa ConfessionServiceProtocol sobre um ConfessionStoreProtocol
(recebido por chamada como `db`) e o cliente REST do Discord.
Falhas esperadas levantam ConfessionError com mensagem para o usuário.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.confession import ExternalChannelReference
from utils.errors import (
    ApprovalLogUnavailableError,
    ChannelDisabledError,
    ChannelNotConfiguredError,
    ConfessionAlreadyApprovedError,
    ConfessionDeliveryError,
    ConfessionNotFoundError,
    ConfessionPendingError,
)

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.confession import ChannelRecord, ConfessionRecord, ConfessOptions
    from app.domain.message import CreateMessage
    from app.protocols.confession_store import ConfessionStoreProtocol
    from app.protocols.http_client import DiscordHttpClientProtocol
    from app.protocols.payload_builder import ConfessionPayloadBuilderProtocol

logger = logging.getLogger(__name__)


class ConfessionService:
    """Orquestra persistência, builders e envio para o Discord."""

    def __init__(
        self,
        http_client: DiscordHttpClientProtocol,
        builder: ConfessionPayloadBuilderProtocol,
    ) -> None:
        self._http = http_client
        self._builder = builder

    async def submit(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        channel_id: int,
        author_id: int,
        options: ConfessOptions,
    ) -> str:
        """Registra uma confissão e publica (ou envia para revisão).

        Returns:
            Mensagem de confirmação para o autor

        Raises:
            ChannelNotConfiguredError: Canal sem setup de confissões
            ChannelDisabledError: Canal desativado no momento da interação
            ApprovalLogUnavailableError: Aprovação exigida sem canal de log
            ConfessionDeliveryError: Discord recusou a mensagem
        """
        channel = await self._require_channel(db, channel_id)
        if channel.is_disabled_at(timestamp):
            logger.info("confession_channel_disabled", extra={"channel_id": str(channel_id)})
            raise ChannelDisabledError()

        if channel.is_approval_required and channel.log_channel_id is None:
            raise ApprovalLogUnavailableError()

        confession = await db.create_confession(
            channel_id=channel_id,
            author_id=author_id,
            content=options.content,
            created_at=timestamp,
            approved=not channel.is_approval_required,
            attachment=options.attachment,
        )
        logger.info(
            "confession_created",
            extra={
                "channel_id": str(channel_id),
                "internal_id": confession.internal_id,
                "confession_id": confession.confession_id,
                "approval_required": channel.is_approval_required,
            },
        )

        if channel.is_approval_required:
            reference = await self._send(
                channel.log_channel_id,
                self._builder.pending_log(channel, confession),
            )
            await db.set_log_reference(confession.internal_id, reference)
            return (
                f"Your confession ({channel.label} #{confession.confession_id}) "
                "has been submitted for approval."
            )

        await self._send(channel_id, self._builder.confession_message(channel, confession))
        await self._log_best_effort(db, channel, confession)
        return f"{channel.label} #{confession.confession_id} submitted."

    async def publish(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        internal_id: int,
        moderator_id: int,
    ) -> str:
        """Publica uma confissão pendente (botão Publish do log)."""
        confession = await self._require_confession(db, internal_id)
        if confession.is_approved:
            raise ConfessionAlreadyApprovedError()

        channel = await self._require_channel(db, confession.channel_id)
        if channel.is_disabled_at(timestamp):
            raise ChannelDisabledError()

        # Só aprova depois do eco aceito; recusa do Discord mantém a confissão pendente.
        await self._send(channel.id, self._builder.confession_message(channel, confession))
        if not await db.approve_confession(internal_id, timestamp):
            raise ConfessionAlreadyApprovedError()

        await self._log_best_effort(db, channel, confession)
        logger.info(
            "confession_published",
            extra={"internal_id": internal_id, "moderator_id": str(moderator_id)},
        )
        return f"{channel.label} #{confession.confession_id} has been published."

    async def delete(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        internal_id: int,
        moderator_id: int,
    ) -> str:
        """Remove uma confissão pendente (botão Delete do log)."""
        confession = await self._require_confession(db, internal_id)
        if confession.is_approved:
            raise ConfessionAlreadyApprovedError()

        if not await db.delete_confession(internal_id):
            raise ConfessionNotFoundError()

        logger.info(
            "confession_deleted",
            extra={"internal_id": internal_id, "moderator_id": str(moderator_id)},
        )
        return f"Confession #{confession.confession_id} has been deleted."

    async def resend(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        internal_id: int,
        moderator_id: int,
    ) -> str:
        """Reenvia uma confissão aprovada e registra quem reenviou."""
        confession = await self._require_confession(db, internal_id)
        if not confession.is_approved:
            raise ConfessionPendingError()

        channel = await self._require_channel(db, confession.channel_id)
        if channel.is_disabled_at(timestamp):
            raise ChannelDisabledError()

        await self._send(channel.id, self._builder.confession_message(channel, confession))
        if channel.log_channel_id is not None:
            reference = await self._send(
                channel.log_channel_id,
                self._builder.resent_log(channel, confession, moderator_id),
            )
            await db.set_log_reference(internal_id, reference)

        logger.info(
            "confession_resent",
            extra={"internal_id": internal_id, "moderator_id": str(moderator_id)},
        )
        return f"{channel.label} #{confession.confession_id} has been resent."

    async def _require_channel(
        self,
        db: ConfessionStoreProtocol,
        channel_id: int,
    ) -> ChannelRecord:
        channel = await db.get_channel(channel_id)
        if channel is None:
            logger.info("confession_channel_not_configured", extra={"channel_id": str(channel_id)})
            raise ChannelNotConfiguredError()
        return channel

    async def _require_confession(
        self,
        db: ConfessionStoreProtocol,
        internal_id: int,
    ) -> ConfessionRecord:
        confession = await db.get_confession(internal_id)
        if confession is None:
            raise ConfessionNotFoundError()
        return confession

    async def _send(self, channel_id: int, message: CreateMessage) -> ExternalChannelReference:
        result = await self._http.create_message(channel_id, message)
        if isinstance(result, ExternalChannelReference):
            return result
        raise ConfessionDeliveryError(result.code)

    async def _log_best_effort(
        self,
        db: ConfessionStoreProtocol,
        channel: ChannelRecord,
        confession: ConfessionRecord,
    ) -> None:
        """Log de aprovação; a confissão já foi publicada, então falha só é logada."""
        if channel.log_channel_id is None:
            return
        try:
            reference = await self._send(
                channel.log_channel_id,
                self._builder.approved_log(channel, confession),
            )
        except ConfessionDeliveryError as exc:
            logger.warning(
                "confession_log_failed",
                extra={"internal_id": confession.internal_id, "error_code": exc.code},
            )
            return
        await db.set_log_reference(confession.internal_id, reference)
