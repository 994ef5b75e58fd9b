"""Builders das mensagens de confissão (canal público e logs de moderação).

Todos os builders são puros: recebem dados já persistidos e devolvem um
CreateMessage pronto para o DiscordHttpClient.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.discord.attachment import apply_attachment, build_attachment_field
from api.payload_builders.discord.components import build_moderation_row
from app.constants.discord import (
    APP_ICON_URL,
    CONFESSION_FOOTER_TEXT,
    LOG_FOOTER_TEXT,
    AllowedMentionType,
    Color,
    MessageFlags,
)
from app.domain.message import (
    AllowedMentions,
    CreateMessage,
    Embed,
    EmbedField,
    EmbedFooter,
    MessageReference,
)

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.message import EmbedAttachment


def build_confession_title(label: str, confession_id: int) -> str:
    return f"{label} #{confession_id}"


def build_confession_message(
    *,
    timestamp: datetime,
    confession_id: int,
    label: str,
    description: str,
    color: int | None = None,
    reply_to_message_id: int | None = None,
    attachment: EmbedAttachment | None = None,
) -> CreateMessage:
    """Mensagem pública da confissão (publicada ou reenviada).

    Args:
        timestamp: Momento da confissão
        confession_id: Número sequencial público do canal
        label: Rótulo do canal ("Confession")
        description: Texto da confissão
        color: Cor do embed (opcional)
        reply_to_message_id: Mensagem a responder (referência tolerante)
        attachment: Anexo (imagem inline ou campo)

    Returns:
        CreateMessage com um embed
    """
    embed = Embed(
        title=build_confession_title(label, confession_id),
        description=description,
        timestamp=timestamp,
        color=color,
        footer=EmbedFooter(text=CONFESSION_FOOTER_TEXT, icon_url=APP_ICON_URL),
    )
    if attachment is not None:
        apply_attachment(embed, attachment)

    message = CreateMessage(embeds=[embed])
    if reply_to_message_id is not None:
        message.message_reference = MessageReference(
            message_id=reply_to_message_id,
            fail_if_not_exists=False,
        )
    return message


def _log_fields(
    author_id: int,
    attachment: EmbedAttachment | None,
    moderator_id: int | None = None,
) -> list[EmbedField]:
    # Autor sempre em spoiler: moderadores revelam só quando precisam
    fields = [EmbedField(name="Authored by", value=f"||<@{author_id}>||", inline=True)]
    if moderator_id is not None:
        fields.append(EmbedField(name="Resent by", value=f"<@{moderator_id}>", inline=True))
    if attachment is not None:
        fields.append(build_attachment_field(attachment))
    return fields


def _build_log_message(
    *,
    timestamp: datetime,
    confession_id: int,
    label: str,
    description: str,
    color: Color,
    fields: list[EmbedField],
) -> CreateMessage:
    return CreateMessage(
        flags=int(MessageFlags.SUPPRESS_NOTIFICATIONS),
        # Conteúdo da confissão não pode disparar @everyone/@here ou cargos
        allowed_mentions=AllowedMentions(parse=[AllowedMentionType.USERS]),
        embeds=[
            Embed(
                title=build_confession_title(label, confession_id),
                description=description,
                timestamp=timestamp,
                color=int(color),
                footer=EmbedFooter(text=LOG_FOOTER_TEXT, icon_url=APP_ICON_URL),
                fields=fields,
            )
        ],
    )


def build_pending_log(
    *,
    timestamp: datetime,
    internal_id: int,
    confession_id: int,
    author_id: int,
    label: str,
    description: str,
    attachment: EmbedAttachment | None = None,
) -> CreateMessage:
    """Log de revisão pendente com botões Publish/Delete.

    Os botões usam `internal_id` (chave durável), não o número público.
    """
    message = _build_log_message(
        timestamp=timestamp,
        confession_id=confession_id,
        label=label,
        description=description,
        color=Color.PENDING,
        fields=_log_fields(author_id, attachment),
    )
    message.components = [build_moderation_row(internal_id)]
    return message


def build_approved_log(
    *,
    timestamp: datetime,
    confession_id: int,
    author_id: int,
    label: str,
    description: str,
    attachment: EmbedAttachment | None = None,
) -> CreateMessage:
    """Log de confissão aprovada (sem botões)."""
    return _build_log_message(
        timestamp=timestamp,
        confession_id=confession_id,
        label=label,
        description=description,
        color=Color.SUCCESS,
        fields=_log_fields(author_id, attachment),
    )


def build_resent_log(
    *,
    timestamp: datetime,
    confession_id: int,
    author_id: int,
    moderator_id: int,
    label: str,
    description: str,
    attachment: EmbedAttachment | None = None,
) -> CreateMessage:
    """Log de confissão reenviada, com o moderador responsável."""
    return _build_log_message(
        timestamp=timestamp,
        confession_id=confession_id,
        label=label,
        description=description,
        color=Color.REPLAY,
        fields=_log_fields(author_id, attachment, moderator_id=moderator_id),
    )
