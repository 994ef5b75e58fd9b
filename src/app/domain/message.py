"""Mensagens outbound (embeds, componentes, referências) da API Discord."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.constants.discord import (
    AllowedMentionType,
    ButtonStyle,
    EmbedType,
    MessageComponentType,
    MessageReferenceType,
)
from app.domain.interaction import Snowflake


class EmbedAttachment(BaseModel):
    """Anexo a ser exibido num embed (imagem inline ou campo com link)."""

    url: str
    content_type: str | None = None
    width: int | None = None
    height: int | None = None
    filename: str | None = None


class EmbedFooter(BaseModel):
    text: str
    icon_url: str | None = None


class EmbedImage(BaseModel):
    url: str
    width: int | None = None
    height: int | None = None


class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool = False


class Embed(BaseModel):
    type: EmbedType = EmbedType.RICH
    title: str
    description: str
    timestamp: datetime
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    fields: list[EmbedField] | None = None


class Emoji(BaseModel):
    name: str


class Button(BaseModel):
    type: MessageComponentType = MessageComponentType.BUTTON
    style: ButtonStyle
    label: str
    custom_id: str
    emoji: Emoji | None = None


class ActionRow(BaseModel):
    type: MessageComponentType = MessageComponentType.ACTION_ROW
    components: list[Button]


class MessageReference(BaseModel):
    type: MessageReferenceType = MessageReferenceType.DEFAULT
    message_id: Snowflake
    channel_id: Snowflake | None = None
    # Resposta a uma mensagem apagada não deve falhar
    fail_if_not_exists: bool = False


class AllowedMentions(BaseModel):
    parse: list[AllowedMentionType] = Field(default_factory=list)
    users: list[Snowflake] | None = None


class CreateMessage(BaseModel):
    """Corpo de POST /channels/{channel_id}/messages."""

    content: str | None = None
    embeds: list[Embed] = Field(default_factory=list)
    components: list[ActionRow] | None = None
    message_reference: MessageReference | None = None
    flags: int | None = None
    allowed_mentions: AllowedMentions | None = None


class CreatedMessage(BaseModel):
    """Subconjunto da resposta 200 de criação de mensagem."""

    id: Snowflake
    channel_id: Snowflake
