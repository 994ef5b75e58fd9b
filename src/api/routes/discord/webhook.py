"""Endpoint de interações do Discord.

Endpoints:
- POST /webhook/discord/interactions: recebimento de interações assinadas

Fluxo:
1. Headers de assinatura e Content-Type validados antes de ler o corpo (400)
2. Assinatura Ed25519 sobre timestamp + corpo bruto (401)
3. Decodificação tudo-ou-nada da interação (400)
4. Dispatch e resposta com o callback inicial (200)

Falhas do dispatch nunca derrubam o request: o usuário sempre recebe um
callback efêmero, com a mensagem do fluxo ou uma mensagem genérica.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.discord.webhook.receive import (
    BadRequestError,
    InvalidSignatureError,
    SignedEnvelope,
    extract_envelope_headers,
    parse_interaction_request,
)
from api.normalizers.discord import InteractionValidationError
from app.domain.callback import (
    build_failure_callback,
    build_message_callback,
    serialize_callback,
)
from app.observability import (
    get_correlation_id,
    record_rejection,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import log_fallback
from utils.errors import ConfessionError

if TYPE_CHECKING:
    from app.bootstrap.dependencies import InteractionRuntime

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_interaction_runtime() -> InteractionRuntime:
    """Obtém verificador e dispatcher (lazy-loading, singleton no bootstrap)."""
    from app.bootstrap import get_interaction_runtime

    return get_interaction_runtime()


def _bad_request(reason: str) -> Response:
    record_rejection(reason, get_correlation_id())
    return Response(
        content="Bad Request",
        media_type="text/plain",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.post("/", response_model=None)
async def receive_interaction(request: Request) -> Response:
    """Recebimento de interações do Discord.

    Returns:
        JSON do callback inicial, ou Response de erro (400/401).
    """
    correlation_id = request.headers.get("x-correlation-id")
    token = set_correlation_id(correlation_id)

    try:
        try:
            envelope_headers = extract_envelope_headers(request.headers)
        except BadRequestError as exc:
            logger.warning(
                "interaction_envelope_invalid",
                extra={"channel": "discord", "error": str(exc)},
            )
            return _bad_request(str(exc))

        raw_body = await request.body()
        envelope = SignedEnvelope.from_headers(envelope_headers, raw_body)
        runtime = _get_interaction_runtime()

        try:
            interaction = parse_interaction_request(envelope, runtime.verifier)
        except InvalidSignatureError as exc:
            logger.warning(
                "interaction_signature_invalid",
                extra={"channel": "discord", "error": str(exc)},
            )
            record_rejection("invalid_signature", get_correlation_id())
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except InteractionValidationError as exc:
            logger.warning(
                "interaction_payload_invalid",
                extra={
                    "channel": "discord",
                    "path": exc.path,
                    "error_type": exc.error_type,
                    "error_count": exc.error_count,
                },
            )
            return _bad_request("invalid_interaction")

        logger.info(
            "interaction_received",
            extra={
                "channel": "discord",
                "interaction_id": str(interaction.id),
                "interaction_type": int(interaction.type),
                "payload_size": len(raw_body),
            },
        )

        try:
            callback = await runtime.dispatcher.dispatch(interaction, envelope.sent_at)
        except ConfessionError as exc:
            logger.info(
                "interaction_confession_rejected",
                extra={
                    "interaction_id": str(interaction.id),
                    "error_type": type(exc).__name__,
                },
            )
            callback = build_message_callback(exc.user_message, ephemeral=True)
        except Exception as exc:
            logger.exception(
                "interaction_dispatch_failed",
                extra={
                    "interaction_id": str(interaction.id),
                    "interaction_type": int(interaction.type),
                    "error_type": type(exc).__name__,
                },
            )
            log_fallback(logger, "interaction_dispatch", reason=type(exc).__name__)
            callback = build_failure_callback()

        return JSONResponse(content=serialize_callback(callback), status_code=status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
