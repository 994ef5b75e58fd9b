"""Cliente HTTP especializado para a API REST do Discord.

Estende HttpClient genérico com:
- Autenticação `Bot {token}` e User-Agent exigido pelo Discord
- Serialização com snowflakes como string decimal (sem perda de precisão)
- Medição de latência por chamada
- Erros do Discord devolvidos como valor (DiscordApiError), nunca levantados
- Sem retry: o chamador decide com base em `DiscordApiError.is_retryable`
"""

from __future__ import annotations

import json
import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import ValidationError

from api.connectors.discord.discord_errors import DiscordApiError, parse_discord_error
from api.connectors.discord.discord_logging import log_discord_error, log_success
from api.connectors.discord.http_base import HttpClient, HttpClientConfig
from app.domain.callback import build_deferred_callback, serialize_callback
from app.domain.confession import ExternalChannelReference
from app.domain.message import CreatedMessage
from app.observability import record_latency

if TYPE_CHECKING:
    import httpx

    from app.domain.callback import (
        ChannelMessageWithSourceCallback,
        DeferredChannelMessageWithSourceCallback,
        PongCallback,
    )
    from app.domain.interaction import ContinuationToken
    from app.domain.message import CreateMessage
    from config.settings import DiscordSettings

logger: logging.Logger = logging.getLogger(__name__)

USER_AGENT = "DiscordBot (https://github.com/spectro-bot/spectro, 1.0.0)"

CREATE_MESSAGE_SUCCESS = 200
INTERACTION_CALLBACK_SUCCESS = 204


class DiscordHttpClient(HttpClient):
    """Cliente da API Discord (create message, interaction callback)."""

    def __init__(
        self,
        bot_token: str,
        api_endpoint: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Discord.

        Args:
            bot_token: Token do bot
            api_endpoint: URL base com versão (ex: https://discord.com/api/v10)
            config: Configuração HTTP base (timeout imposto pelo chamador)
            transport: Transport httpx alternativo (testes)

        Raises:
            ValueError: Se bot_token estiver vazio
        """
        if not bot_token or not bot_token.strip():
            raise ValueError("bot_token é obrigatório. Verifique DISCORD_BOT_TOKEN.")
        super().__init__(config, transport)
        self._bot_token = bot_token
        self._api_endpoint = api_endpoint.rstrip("/")

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bot {self._bot_token}",
            "User-Agent": USER_AGENT,
        }

    async def create_message(
        self,
        channel_id: int,
        message: CreateMessage,
    ) -> ExternalChannelReference | DiscordApiError:
        """Cria mensagem num canal (multipart com campo `payload_json`).

        Args:
            channel_id: Canal de destino
            message: Mensagem construída pelos payload builders

        Returns:
            ExternalChannelReference da mensagem criada, ou DiscordApiError

        Raises:
            HttpError: Em timeout ou falha de conexão
        """
        operation = "create_message"
        payload_json = json.dumps(message.model_dump(mode="json", exclude_none=True))
        url = f"{self._api_endpoint}/channels/{channel_id}/messages"

        start = time.perf_counter()
        response = await self.post(
            url,
            files={"payload_json": (None, payload_json, "application/json")},
            headers=self._auth_headers(),
        )
        latency_ms = (time.perf_counter() - start) * 1000
        record_latency("discord_api", operation, latency_ms, status_code=response.status_code)

        if response.status_code != CREATE_MESSAGE_SUCCESS:
            error = parse_discord_error(response.status_code, response.content)
            log_discord_error(error, operation, latency_ms)
            return error

        try:
            created = CreatedMessage.model_validate_json(response.content)
        except ValidationError:
            error = DiscordApiError(
                status_code=response.status_code,
                code=0,
                message="invalid_response_body",
            )
            log_discord_error(error, operation, latency_ms)
            return error

        log_success(operation, response.status_code, latency_ms)
        return ExternalChannelReference(channel_id=created.channel_id, message_id=created.id)

    async def create_interaction_callback(
        self,
        token: ContinuationToken,
        callback: PongCallback
        | ChannelMessageWithSourceCallback
        | DeferredChannelMessageWithSourceCallback,
        now: datetime | None = None,
    ) -> DiscordApiError | None:
        """Responde a uma interação via REST.

        O token é consumido antes da chamada; expirado ou já usado é um
        erro distinto, detectado sem tocar a rede.

        Returns:
            None em sucesso (204), ou DiscordApiError

        Raises:
            ContinuationTokenExpiredError: Se o prazo do token passou
            ContinuationTokenConsumedError: Se o token já foi usado
            HttpError: Em timeout ou falha de conexão
        """
        operation = "create_interaction_callback"
        raw_token = token.consume(now or datetime.now(UTC))
        url = f"{self._api_endpoint}/interactions/{token.interaction_id}/{raw_token}/callback"

        start = time.perf_counter()
        response = await self.post(
            url,
            json=serialize_callback(callback),
            headers=self._auth_headers(),
        )
        latency_ms = (time.perf_counter() - start) * 1000
        record_latency("discord_api", operation, latency_ms, status_code=response.status_code)

        if response.status_code == INTERACTION_CALLBACK_SUCCESS:
            log_success(operation, response.status_code, latency_ms)
            return None

        error = parse_discord_error(response.status_code, response.content)
        log_discord_error(error, operation, latency_ms)
        return error

    async def defer_response(
        self,
        token: ContinuationToken,
        now: datetime | None = None,
    ) -> DiscordApiError | None:
        """Adia a resposta (efêmera) para responder depois via follow-up."""
        return await self.create_interaction_callback(token, build_deferred_callback(), now)


def create_discord_http_client(settings: DiscordSettings) -> DiscordHttpClient:
    """Factory do cliente Discord a partir das settings já carregadas."""
    return DiscordHttpClient(
        bot_token=settings.bot_token,
        api_endpoint=settings.api_endpoint,
        config=HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
    )
