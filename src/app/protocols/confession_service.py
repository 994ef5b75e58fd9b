"""Protocolo do fluxo de confissões consumido pelo dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.confession import ConfessOptions
    from app.protocols.confession_store import ConfessionStoreProtocol


class ConfessionServiceProtocol(Protocol):
    """Lógica de negócio das confissões.

    Cada operação devolve a mensagem de confirmação para o usuário ou
    levanta ConfessionError (falha esperada, com mensagem própria).
    """

    async def submit(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        channel_id: int,
        author_id: int,
        options: ConfessOptions,
    ) -> str: ...

    async def publish(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        internal_id: int,
        moderator_id: int,
    ) -> str: ...

    async def delete(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        internal_id: int,
        moderator_id: int,
    ) -> str: ...

    async def resend(
        self,
        db: ConfessionStoreProtocol,
        timestamp: datetime,
        internal_id: int,
        moderator_id: int,
    ) -> str: ...
