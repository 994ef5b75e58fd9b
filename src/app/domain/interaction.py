"""Interações recebidas do Discord (união discriminada por `type`).

Os modelos só representam estados válidos: campos que o dispatcher usa
(canal, membro, opções) são obrigatórios, então um payload sem eles é
rejeitado na decodificação e nunca chega ao dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, PlainSerializer

from app.constants.discord import INITIAL_RESPONSE_WINDOW_SECONDS
from utils.errors import ContinuationTokenConsumedError, ContinuationTokenExpiredError

# IDs do Discord chegam como string decimal e voltam como string (64 bits)
Snowflake = Annotated[int, Field(ge=0), PlainSerializer(str, return_type=str)]


class User(BaseModel):
    id: Snowflake
    username: str
    global_name: str | None = None


class Member(BaseModel):
    user: User
    nick: str | None = None


class Attachment(BaseModel):
    """Anexo resolvido de uma opção do tipo ATTACHMENT."""

    id: Snowflake
    filename: str
    url: str
    content_type: str | None = None
    width: int | None = None
    height: int | None = None
    size: int | None = None


class ResolvedData(BaseModel):
    attachments: dict[str, Attachment] = Field(default_factory=dict)


class ApplicationCommandOption(BaseModel):
    name: str
    type: int
    value: str | int | float | bool | None = None


class ApplicationCommandData(BaseModel):
    id: Snowflake
    name: str
    type: int = 1
    options: list[ApplicationCommandOption]
    resolved: ResolvedData | None = None


class MessageComponentData(BaseModel):
    custom_id: str
    component_type: int


class _InteractionBase(BaseModel):
    id: Snowflake
    application_id: Snowflake
    token: str
    version: int = 1
    guild_id: Snowflake | None = None


class PingInteraction(_InteractionBase):
    type: Literal[1]


class ApplicationCommandInteraction(_InteractionBase):
    type: Literal[2]
    channel_id: Snowflake
    member: Member
    data: ApplicationCommandData


class MessageComponentInteraction(_InteractionBase):
    type: Literal[3]
    channel_id: Snowflake
    member: Member
    data: MessageComponentData


class AutocompleteInteraction(_InteractionBase):
    type: Literal[4]
    data: dict[str, Any]


class ModalSubmitInteraction(_InteractionBase):
    type: Literal[5]
    data: dict[str, Any]


Interaction = Annotated[
    PingInteraction
    | ApplicationCommandInteraction
    | MessageComponentInteraction
    | AutocompleteInteraction
    | ModalSubmitInteraction,
    Field(discriminator="type"),
]


@dataclass(slots=True)
class ContinuationToken:
    """Capacidade de responder uma única vez a uma interação.

    O Discord invalida o token do callback inicial poucos segundos após a
    entrega; `consume` torna esse prazo e o uso único verificáveis antes
    de qualquer chamada REST.
    """

    interaction_id: int
    value: str = field(repr=False)
    expires_at: datetime
    consumed: bool = False

    @classmethod
    def from_interaction(
        cls,
        interaction: _InteractionBase,
        received_at: datetime,
        window_seconds: float = INITIAL_RESPONSE_WINDOW_SECONDS,
    ) -> ContinuationToken:
        return cls(
            interaction_id=interaction.id,
            value=interaction.token,
            expires_at=received_at + timedelta(seconds=window_seconds),
        )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def consume(self, now: datetime) -> str:
        """Marca o token como usado e devolve o valor bruto.

        Raises:
            ContinuationTokenConsumedError: Se o token já foi usado
            ContinuationTokenExpiredError: Se o prazo expirou
        """
        if self.consumed:
            raise ContinuationTokenConsumedError(self.interaction_id)
        if self.is_expired(now):
            raise ContinuationTokenExpiredError(self.interaction_id)
        self.consumed = True
        return self.value
