"""Use case de dispatch de interações Discord.

Mapeia (variante da interação, nome do comando ou ação) para a resposta.
Não guarda estado entre chamadas: a lógica de negócio fica no
ConfessionServiceProtocol injetado e o estado no store (`db`).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.discord import ApplicationCommandOptionType, ComponentAction
from app.domain.callback import build_message_callback, build_pong_callback
from app.domain.confession import ConfessOptions
from app.domain.custom_id import parse_custom_id
from app.domain.interaction import (
    ApplicationCommandInteraction,
    MessageComponentInteraction,
    PingInteraction,
)
from app.domain.message import EmbedAttachment
from utils.errors import InvariantViolationError

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.callback import ChannelMessageWithSourceCallback, PongCallback
    from app.domain.interaction import ApplicationCommandData, Interaction
    from app.protocols.confession_service import ConfessionServiceProtocol
    from app.protocols.confession_store import ConfessionStoreProtocol

logger = logging.getLogger(__name__)

CONFESS_COMMAND_NAME = "confess"
CONTENT_OPTION_NAME = "content"
ATTACHMENT_OPTION_NAME = "attachment"


class DispatchError(Exception):
    """Interação entregue que esta aplicação não registrou."""


class UnknownCommandError(DispatchError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown command: {name}")
        self.name = name


class UnsupportedInteractionTypeError(DispatchError):
    def __init__(self, interaction_type: int) -> None:
        super().__init__(f"unsupported interaction type: {interaction_type}")
        self.interaction_type = interaction_type


class UnknownComponentActionError(DispatchError):
    def __init__(self, action: str) -> None:
        super().__init__(f"unknown component action: {action}")
        self.action = action


class InteractionDispatcher:
    """Despacha interações já verificadas e decodificadas."""

    def __init__(
        self,
        confessions: ConfessionServiceProtocol,
        db: ConfessionStoreProtocol,
    ) -> None:
        self._confessions = confessions
        self._db = db

    async def dispatch(
        self,
        interaction: Interaction,
        timestamp: datetime,
    ) -> PongCallback | ChannelMessageWithSourceCallback:
        """Executa a interação e devolve o callback inicial.

        Args:
            interaction: Variante decodificada
            timestamp: Momento assinado pelo Discord (X-Signature-Timestamp, UTC)

        Returns:
            Callback a ser devolvido no corpo da resposta HTTP

        Raises:
            DispatchError: Comando, ação ou tipo não tratados
            InvariantViolationError: Opções ou custom_id fora do contrato
            ConfessionError: Falha esperada do fluxo de confissões
        """
        if isinstance(interaction, PingInteraction):
            return build_pong_callback()

        if isinstance(interaction, ApplicationCommandInteraction):
            return await self._dispatch_command(interaction, timestamp)

        if isinstance(interaction, MessageComponentInteraction):
            return await self._dispatch_component(interaction, timestamp)

        logger.error(
            "interaction_type_unsupported",
            extra={
                "interaction_id": str(interaction.id),
                "interaction_type": int(interaction.type),
            },
        )
        raise UnsupportedInteractionTypeError(interaction.type)

    async def _dispatch_command(
        self,
        interaction: ApplicationCommandInteraction,
        timestamp: datetime,
    ) -> ChannelMessageWithSourceCallback:
        name = interaction.data.name
        if name != CONFESS_COMMAND_NAME:
            logger.error(
                "interaction_command_unknown",
                extra={"interaction_id": str(interaction.id), "command_name": name},
            )
            raise UnknownCommandError(name)

        options = parse_confess_options(interaction.data)
        logger.info(
            "interaction_command_dispatched",
            extra={
                "interaction_id": str(interaction.id),
                "command_name": name,
                "channel_id": str(interaction.channel_id),
                "has_attachment": options.attachment is not None,
            },
        )
        content = await self._confessions.submit(
            self._db,
            timestamp,
            interaction.channel_id,
            interaction.member.user.id,
            options,
        )
        return build_message_callback(content)

    async def _dispatch_component(
        self,
        interaction: MessageComponentInteraction,
        timestamp: datetime,
    ) -> ChannelMessageWithSourceCallback:
        action, internal_id = parse_custom_id(interaction.data.custom_id)
        moderator_id = interaction.member.user.id

        logger.info(
            "interaction_component_dispatched",
            extra={
                "interaction_id": str(interaction.id),
                "action": action,
                "internal_id": internal_id,
            },
        )
        if action == ComponentAction.PUBLISH:
            content = await self._confessions.publish(self._db, timestamp, internal_id, moderator_id)
        elif action == ComponentAction.DELETE:
            content = await self._confessions.delete(self._db, timestamp, internal_id, moderator_id)
        else:
            logger.error(
                "interaction_component_action_unknown",
                extra={"interaction_id": str(interaction.id), "action": action},
            )
            raise UnknownComponentActionError(action)

        return build_message_callback(content, ephemeral=True)


def parse_confess_options(data: ApplicationCommandData) -> ConfessOptions:
    """Extrai texto e anexo das opções do /confess.

    Raises:
        InvariantViolationError: Sem opção de texto, ou anexo não resolvido
    """
    content: str | None = None
    attachment: EmbedAttachment | None = None

    for option in data.options:
        if option.name == CONTENT_OPTION_NAME:
            if not isinstance(option.value, str):
                raise InvariantViolationError("confess content option must be a string")
            content = option.value
        elif option.name == ATTACHMENT_OPTION_NAME:
            if option.type != ApplicationCommandOptionType.ATTACHMENT:
                raise InvariantViolationError("confess attachment option has wrong type")
            attachment = _resolve_attachment(data, str(option.value))

    if content is None:
        raise InvariantViolationError("confess command without content option")
    return ConfessOptions(content=content, attachment=attachment)


def _resolve_attachment(data: ApplicationCommandData, attachment_id: str) -> EmbedAttachment:
    resolved = data.resolved.attachments if data.resolved is not None else {}
    found = resolved.get(attachment_id)
    if found is None:
        raise InvariantViolationError(f"attachment {attachment_id} not resolved")
    return EmbedAttachment(
        url=found.url,
        content_type=found.content_type,
        width=found.width,
        height=found.height,
        filename=found.filename,
    )


__all__ = [
    "CONFESS_COMMAND_NAME",
    "DispatchError",
    "InteractionDispatcher",
    "UnknownCommandError",
    "UnknownComponentActionError",
    "UnsupportedInteractionTypeError",
    "parse_confess_options",
]
