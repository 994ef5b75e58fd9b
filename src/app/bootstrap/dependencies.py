"""Factories de dependências — criação de implementações concretas.

Único ponto que lê settings do ambiente e as entrega, já carregadas,
aos construtores (verificador, cliente REST, store, serviço).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.discord import (
    DiscordSignatureVerifier,
    create_discord_http_client,
)
from api.payload_builders.discord import DiscordConfessionPayloadBuilder
from app.infra.stores import MemoryConfessionStore
from app.services import ConfessionService
from app.use_cases.discord import InteractionDispatcher
from config.settings import get_discord_settings

if TYPE_CHECKING:
    from api.connectors.discord import DiscordHttpClient
    from app.protocols.confession_store import ConfessionStoreProtocol
    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InteractionRuntime:
    """Dependências do webhook de interações, montadas uma vez por processo."""

    verifier: DiscordSignatureVerifier
    dispatcher: InteractionDispatcher


def create_confession_store() -> ConfessionStoreProtocol:
    """Cria store de confissões baseado na configuração.

    Lê CONFESSION_STORE_BACKEND da env:
    - "memory": MemoryConfessionStore (dev e testes)

    Returns:
        Implementação de ConfessionStoreProtocol
    """
    backend = os.getenv("CONFESSION_STORE_BACKEND", "memory").lower()

    if backend == "memory":
        environment = os.getenv("ENVIRONMENT", "development")
        if environment not in ("development", "test"):
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryConfessionStore()
        logger.info("confession_store_created", extra={"backend": "memory"})
        return store

    msg = f"CONFESSION_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_signature_verifier(settings: DiscordSettings | None = None) -> DiscordSignatureVerifier:
    settings = settings or get_discord_settings()
    return DiscordSignatureVerifier(settings.public_key)


def create_http_client(settings: DiscordSettings | None = None) -> DiscordHttpClient:
    return create_discord_http_client(settings or get_discord_settings())


def create_interaction_dispatcher(
    http_client: DiscordHttpClient,
    store: ConfessionStoreProtocol,
) -> InteractionDispatcher:
    service = ConfessionService(http_client, DiscordConfessionPayloadBuilder())
    return InteractionDispatcher(confessions=service, db=store)


def create_interaction_runtime(settings: DiscordSettings | None = None) -> InteractionRuntime:
    """Monta verificador e dispatcher a partir das settings do Discord.

    Raises:
        ValueError: Chave pública ou token ausentes/malformados
    """
    settings = settings or get_discord_settings()
    dispatcher = create_interaction_dispatcher(
        http_client=create_http_client(settings),
        store=create_confession_store(),
    )
    logger.info(
        "interaction_runtime_created",
        extra={"application_id": settings.application_id, "api_version": settings.api_version},
    )
    return InteractionRuntime(
        verifier=create_signature_verifier(settings),
        dispatcher=dispatcher,
    )
