"""Validação do envelope assinado e parsing seguro da interação (sem PII)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.normalizers.discord import decode_interaction

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.connectors.discord.signature import DiscordSignatureVerifier, SignatureResult
    from app.domain.interaction import Interaction

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"
CONTENT_TYPE_HEADER = "content-type"
EXPECTED_CONTENT_TYPE = "application/json"

_TIMESTAMP_REGEX = re.compile(r"[0-9]{1,11}")


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class BadRequestError(WebhookRequestError):
    """Envelope malformado (HTTP 400)."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida (HTTP 401)."""


@dataclass(frozen=True, slots=True)
class EnvelopeHeaders:
    """Headers de assinatura já validados estruturalmente."""

    signature: str
    timestamp: str
    content_type: str


@dataclass(frozen=True, slots=True)
class SignedEnvelope:
    """Request bruto com os headers de assinatura."""

    body: bytes
    signature: str
    timestamp: str
    content_type: str

    @classmethod
    def from_headers(cls, headers: EnvelopeHeaders, body: bytes) -> SignedEnvelope:
        return cls(
            body=body,
            signature=headers.signature,
            timestamp=headers.timestamp,
            content_type=headers.content_type,
        )

    @property
    def sent_at(self) -> datetime:
        """Momento declarado pelo Discord (segundos Unix)."""
        return datetime.fromtimestamp(int(self.timestamp), tz=UTC)


def extract_envelope_headers(headers: Mapping[str, str]) -> EnvelopeHeaders:
    """Valida headers obrigatórios antes de qualquer leitura do corpo.

    Args:
        headers: Headers recebidos

    Raises:
        BadRequestError: Content-Type diferente de application/json (inclusive
            com sufixo de charset), header de assinatura/timestamp ausente ou
            timestamp não decimal (até 11 dígitos)

    Returns:
        EnvelopeHeaders
    """
    normalized = {key.lower(): value for key, value in headers.items()}

    signature = normalized.get(SIGNATURE_HEADER)
    if signature is None:
        raise BadRequestError("missing_signature_header")

    timestamp = normalized.get(TIMESTAMP_HEADER)
    if timestamp is None:
        raise BadRequestError("missing_timestamp_header")

    if not _TIMESTAMP_REGEX.fullmatch(timestamp):
        raise BadRequestError("invalid_timestamp_header")

    content_type = normalized.get(CONTENT_TYPE_HEADER)
    if content_type != EXPECTED_CONTENT_TYPE:
        raise BadRequestError("invalid_content_type")

    return EnvelopeHeaders(
        signature=signature,
        timestamp=timestamp,
        content_type=content_type,
    )


def verify_envelope(
    envelope: SignedEnvelope,
    verifier: DiscordSignatureVerifier,
) -> SignatureResult:
    """Verifica a assinatura do envelope.

    Raises:
        InvalidSignatureError: Se a assinatura não confere ou está malformada
    """
    result = verifier.verify(envelope.body, envelope.signature, envelope.timestamp)
    if not result.valid:
        raise InvalidSignatureError(result.error or "invalid_signature")
    return result


def parse_interaction_request(
    envelope: SignedEnvelope,
    verifier: DiscordSignatureVerifier,
) -> Interaction:
    """Autentica o envelope e decodifica a interação.

    Raises:
        InvalidSignatureError: Se a assinatura for inválida
        InteractionValidationError: Se o payload não corresponder a nenhuma variante
    """
    verify_envelope(envelope, verifier)
    return decode_interaction(envelope.body)
