"""Testes da verificação Ed25519 das interações."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from api.connectors.discord.signature import DiscordSignatureVerifier, load_public_key

BODY = b'{"type":1,"id":"1","application_id":"2","token":"t","version":1}'
TIMESTAMP = "1700000000"


@pytest.fixture
def private_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture
def verifier(private_key: Ed25519PrivateKey) -> DiscordSignatureVerifier:
    public_hex = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()
    return DiscordSignatureVerifier(public_hex)


def _sign(private_key: Ed25519PrivateKey, timestamp: str, body: bytes) -> str:
    return private_key.sign(timestamp.encode("utf-8") + body).hex()


def _flip_bit(data: bytes, index: int) -> bytes:
    mutated = bytearray(data)
    mutated[index // 8] ^= 1 << (index % 8)
    return bytes(mutated)


def test_valid_signature(private_key: Ed25519PrivateKey, verifier: DiscordSignatureVerifier) -> None:
    result = verifier.verify(BODY, _sign(private_key, TIMESTAMP, BODY), TIMESTAMP)

    assert result.valid is True
    assert result.error is None


def test_accepts_loaded_public_key(private_key: Ed25519PrivateKey) -> None:
    public_hex = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()
    verifier = DiscordSignatureVerifier(load_public_key(public_hex))

    assert verifier.verify(BODY, _sign(private_key, TIMESTAMP, BODY), TIMESTAMP).valid is True


@pytest.mark.parametrize("bit", [0, 7, 100, len(BODY) * 8 - 1])
def test_body_bit_flip_fails(
    private_key: Ed25519PrivateKey,
    verifier: DiscordSignatureVerifier,
    bit: int,
) -> None:
    signature = _sign(private_key, TIMESTAMP, BODY)

    result = verifier.verify(_flip_bit(BODY, bit), signature, TIMESTAMP)

    assert result.valid is False
    assert result.error == "signature_mismatch"


@pytest.mark.parametrize("bit", [0, 255, 511])
def test_signature_bit_flip_fails(
    private_key: Ed25519PrivateKey,
    verifier: DiscordSignatureVerifier,
    bit: int,
) -> None:
    signature = bytes.fromhex(_sign(private_key, TIMESTAMP, BODY))

    result = verifier.verify(BODY, _flip_bit(signature, bit).hex(), TIMESTAMP)

    assert result.valid is False


def test_timestamp_mutation_fails(
    private_key: Ed25519PrivateKey,
    verifier: DiscordSignatureVerifier,
) -> None:
    signature = _sign(private_key, TIMESTAMP, BODY)

    result = verifier.verify(BODY, signature, "1700000001")

    assert result.valid is False


def test_signature_from_other_key_fails(verifier: DiscordSignatureVerifier) -> None:
    other = Ed25519PrivateKey.generate()

    result = verifier.verify(BODY, _sign(other, TIMESTAMP, BODY), TIMESTAMP)

    assert result.valid is False


def test_non_hex_signature_is_invalid_not_crash(verifier: DiscordSignatureVerifier) -> None:
    result = verifier.verify(BODY, "zz" * 64, TIMESTAMP)

    assert result.valid is False
    assert result.error == "signature_not_hex"


def test_wrong_length_signature_is_invalid(verifier: DiscordSignatureVerifier) -> None:
    result = verifier.verify(BODY, "ab" * 32, TIMESTAMP)

    assert result.valid is False
    assert result.error == "signature_wrong_length"


def test_load_public_key_rejects_short_key() -> None:
    with pytest.raises(ValueError):
        load_public_key("abcd")
