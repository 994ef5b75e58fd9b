"""Registros de confissão e canal mantidos pela camada de persistência."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.message import EmbedAttachment


@dataclass(frozen=True, slots=True)
class ExternalChannelReference:
    """Localização de uma mensagem publicada (para publish/delete/resend)."""

    channel_id: int
    message_id: int


@dataclass(frozen=True, slots=True)
class ConfessOptions:
    """Opções do comando /confess já resolvidas."""

    content: str
    attachment: EmbedAttachment | None = None


@dataclass(slots=True)
class ChannelRecord:
    """Canal habilitado para confissões.

    Attributes:
        id: ID do canal Discord
        guild_id: ID do servidor
        last_confession_id: Último número público emitido no canal
        disabled_at: Momento de desativação (None = habilitado)
        is_approval_required: Confissões passam por revisão antes de publicar
        label: Rótulo exibido no título ("Confession #12")
        color: Cor dos embeds publicados
        log_channel_id: Canal de logs de moderação do servidor
    """

    id: int
    guild_id: int
    last_confession_id: int = 0
    disabled_at: datetime | None = None
    is_approval_required: bool = False
    label: str = "Confession"
    color: int | None = None
    log_channel_id: int | None = None

    def is_disabled_at(self, timestamp: datetime) -> bool:
        return self.disabled_at is not None and self.disabled_at <= timestamp


@dataclass(slots=True)
class ConfessionRecord:
    """Confissão persistida.

    `internal_id` é a chave durável usada nos botões de moderação;
    `confession_id` é o número sequencial público do canal.
    """

    internal_id: int
    channel_id: int
    confession_id: int
    author_id: int
    content: str
    created_at: datetime
    approved_at: datetime | None = None
    attachment: EmbedAttachment | None = None
    log_reference: ExternalChannelReference | None = None

    @property
    def is_approved(self) -> bool:
        return self.approved_at is not None
