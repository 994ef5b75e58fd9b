"""Verificação de assinatura Ed25519 das interações do Discord."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

ED25519_SIGNATURE_SIZE = 64


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação (sem expor a assinatura)."""

    valid: bool
    error: str | None = None


def load_public_key(public_key_hex: str) -> Ed25519PublicKey:
    """Carrega a chave pública da aplicação a partir do hex do portal.

    Raises:
        ValueError: Se o hex for inválido ou não tiver 32 bytes
    """
    return Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key_hex))


class DiscordSignatureVerifier:
    """Verifica `X-Signature-Ed25519` sobre timestamp + corpo bruto."""

    def __init__(self, public_key: Ed25519PublicKey | str) -> None:
        if isinstance(public_key, str):
            public_key = load_public_key(public_key)
        self._public_key = public_key

    def verify(self, body: bytes, signature_hex: str, timestamp: str) -> SignatureResult:
        """Verifica a assinatura.

        A mensagem assinada é o timestamp bruto seguido do corpo exatamente
        como recebido; reserializar o JSON invalida a assinatura.

        Args:
            body: Corpo bruto do request
            signature_hex: Header X-Signature-Ed25519
            timestamp: Header X-Signature-Timestamp

        Returns:
            SignatureResult (nunca levanta para entrada malformada)
        """
        try:
            signature = bytes.fromhex(signature_hex)
        except ValueError:
            return SignatureResult(valid=False, error="signature_not_hex")

        if len(signature) != ED25519_SIGNATURE_SIZE:
            return SignatureResult(valid=False, error="signature_wrong_length")

        try:
            self._public_key.verify(signature, timestamp.encode("utf-8") + body)
        except InvalidSignature:
            return SignatureResult(valid=False, error="signature_mismatch")

        return SignatureResult(valid=True)
