"""Respostas a interações (união discriminada por `type`).

Cada variante carrega apenas o payload do seu tipo: uma resposta com
mensagem e uma resposta adiada nunca se misturam.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from app.constants.discord import MessageFlags
from app.domain.message import AllowedMentions, Embed

GENERIC_FAILURE_MESSAGE = "Something went wrong while processing this interaction."


class CallbackMessageData(BaseModel):
    content: str | None = None
    embeds: list[Embed] | None = None
    flags: int | None = None
    allowed_mentions: AllowedMentions | None = None


class DeferredCallbackData(BaseModel):
    flags: int | None = None


class PongCallback(BaseModel):
    type: Literal[1] = 1


class ChannelMessageWithSourceCallback(BaseModel):
    type: Literal[4] = 4
    data: CallbackMessageData


class DeferredChannelMessageWithSourceCallback(BaseModel):
    type: Literal[5] = 5
    data: DeferredCallbackData = Field(default_factory=DeferredCallbackData)


InteractionCallback = Annotated[
    PongCallback | ChannelMessageWithSourceCallback | DeferredChannelMessageWithSourceCallback,
    Field(discriminator="type"),
]


def serialize_callback(
    callback: PongCallback
    | ChannelMessageWithSourceCallback
    | DeferredChannelMessageWithSourceCallback,
) -> dict:
    """Converte callback para JSON do Discord (sem campos nulos)."""
    return callback.model_dump(mode="json", exclude_none=True)


def build_pong_callback() -> PongCallback:
    return PongCallback()


def build_message_callback(
    content: str,
    *,
    ephemeral: bool = False,
) -> ChannelMessageWithSourceCallback:
    """Resposta com mensagem; efêmera fica visível só para quem interagiu."""
    data = CallbackMessageData(content=content)
    if ephemeral:
        data.flags = int(MessageFlags.EPHEMERAL)
        data.allowed_mentions = AllowedMentions(parse=[])
    return ChannelMessageWithSourceCallback(data=data)


def build_deferred_callback(*, ephemeral: bool = True) -> DeferredChannelMessageWithSourceCallback:
    flags = int(MessageFlags.EPHEMERAL) if ephemeral else None
    return DeferredChannelMessageWithSourceCallback(data=DeferredCallbackData(flags=flags))


def build_failure_callback(message: str = GENERIC_FAILURE_MESSAGE) -> ChannelMessageWithSourceCallback:
    """Resposta degradada quando o dispatch falha."""
    return build_message_callback(message, ephemeral=True)
