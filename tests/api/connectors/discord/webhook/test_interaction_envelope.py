"""Testes da validação do envelope assinado e do parsing da interação."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from api.connectors.discord.signature import DiscordSignatureVerifier
from api.connectors.discord.webhook.receive import (
    BadRequestError,
    EnvelopeHeaders,
    InvalidSignatureError,
    SignedEnvelope,
    extract_envelope_headers,
    parse_interaction_request,
)
from api.normalizers.discord import InteractionValidationError
from app.domain.interaction import PingInteraction

TIMESTAMP = "1700000000"


def _headers(**overrides: str | None) -> dict[str, str]:
    headers = {
        "X-Signature-Ed25519": "ab" * 64,
        "X-Signature-Timestamp": TIMESTAMP,
        "Content-Type": "application/json",
    }
    for key, value in overrides.items():
        name = key.replace("_", "-")
        if value is None:
            headers.pop(name)
        else:
            headers[name] = value
    return headers


def test_extract_headers_ok_case_insensitive() -> None:
    result = extract_envelope_headers(_headers())

    assert result == EnvelopeHeaders(
        signature="ab" * 64,
        timestamp=TIMESTAMP,
        content_type="application/json",
    )


@pytest.mark.parametrize(
    ("overrides", "reason"),
    [
        ({"X_Signature_Ed25519": None}, "missing_signature_header"),
        ({"X_Signature_Timestamp": None}, "missing_timestamp_header"),
        ({"X_Signature_Timestamp": "17e9"}, "invalid_timestamp_header"),
        ({"X_Signature_Timestamp": ""}, "invalid_timestamp_header"),
        ({"X_Signature_Timestamp": "9" * 400}, "invalid_timestamp_header"),
        ({"Content_Type": None}, "invalid_content_type"),
        ({"Content_Type": "application/json; charset=utf-8"}, "invalid_content_type"),
        ({"Content_Type": "text/plain"}, "invalid_content_type"),
    ],
)
def test_extract_headers_rejects(overrides: dict[str, str | None], reason: str) -> None:
    with pytest.raises(BadRequestError) as exc_info:
        extract_envelope_headers(_headers(**overrides))

    assert str(exc_info.value) == reason


def test_signed_envelope_sent_at() -> None:
    envelope = SignedEnvelope.from_headers(extract_envelope_headers(_headers()), b"{}")

    assert envelope.sent_at == datetime.fromtimestamp(1700000000, tz=UTC)
    assert envelope.body == b"{}"


class TestParseInteractionRequest:
    def setup_method(self) -> None:
        self.private_key = Ed25519PrivateKey.generate()
        public_hex = (
            self.private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()
        )
        self.verifier = DiscordSignatureVerifier(public_hex)

    def _envelope(self, body: bytes, signed_body: bytes | None = None) -> SignedEnvelope:
        signature = self.private_key.sign(TIMESTAMP.encode() + (signed_body or body)).hex()
        return SignedEnvelope(
            body=body,
            signature=signature,
            timestamp=TIMESTAMP,
            content_type="application/json",
        )

    def test_valid_ping(self) -> None:
        body = json.dumps(
            {"id": "1", "application_id": "2", "type": 1, "token": "tok", "version": 1}
        ).encode()

        interaction = parse_interaction_request(self._envelope(body), self.verifier)

        assert isinstance(interaction, PingInteraction)

    def test_tampered_body_raises_invalid_signature(self) -> None:
        body = b'{"id":"1","application_id":"2","type":1,"token":"tok"}'
        tampered = body.replace(b'"tok"', b'"tak"')

        with pytest.raises(InvalidSignatureError):
            parse_interaction_request(self._envelope(tampered, signed_body=body), self.verifier)

    def test_signature_checked_before_decoding(self) -> None:
        envelope = SignedEnvelope(
            body=b"not json",
            signature="00" * 64,
            timestamp=TIMESTAMP,
            content_type="application/json",
        )

        with pytest.raises(InvalidSignatureError):
            parse_interaction_request(envelope, self.verifier)

    def test_valid_signature_invalid_payload(self) -> None:
        with pytest.raises(InteractionValidationError):
            parse_interaction_request(self._envelope(b'{"type": 99}'), self.verifier)
