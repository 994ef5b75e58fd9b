"""Webhook de interações: envelope, assinatura e parsing seguro."""

from .receive import (
    BadRequestError,
    EnvelopeHeaders,
    InvalidSignatureError,
    SignedEnvelope,
    WebhookRequestError,
    extract_envelope_headers,
    parse_interaction_request,
    verify_envelope,
)

__all__ = [
    "BadRequestError",
    "EnvelopeHeaders",
    "InvalidSignatureError",
    "SignedEnvelope",
    "WebhookRequestError",
    "extract_envelope_headers",
    "parse_interaction_request",
    "verify_envelope",
]
