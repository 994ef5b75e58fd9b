"""Exceções compartilhadas entre as camadas api/ e app/."""

from __future__ import annotations


class InvariantViolationError(RuntimeError):
    """Contrato interno quebrado (bug, nunca erro do usuário)."""


class ContinuationTokenError(RuntimeError):
    """Token de resposta da interação não pode mais ser usado."""

    def __init__(self, interaction_id: int, reason: str) -> None:
        super().__init__(f"{reason} (interaction {interaction_id})")
        self.interaction_id = interaction_id
        self.reason = reason


class ContinuationTokenExpiredError(ContinuationTokenError):
    """Prazo do token de resposta expirou."""

    def __init__(self, interaction_id: int) -> None:
        super().__init__(interaction_id, "continuation_token_expired")


class ContinuationTokenConsumedError(ContinuationTokenError):
    """Token de resposta já foi usado."""

    def __init__(self, interaction_id: int) -> None:
        super().__init__(interaction_id, "continuation_token_consumed")


class ConfessionError(Exception):
    """Falha esperada do fluxo de confissões, com mensagem para o usuário."""

    user_message = "Your confession could not be processed."

    def __init__(self, user_message: str | None = None) -> None:
        if user_message is not None:
            self.user_message = user_message
        super().__init__(self.user_message)


class ChannelNotConfiguredError(ConfessionError):
    user_message = "This channel has not been set up for confessions."


class ChannelDisabledError(ConfessionError):
    user_message = "This channel has temporarily disabled confessions."


class ApprovalLogUnavailableError(ConfessionError):
    user_message = "This channel requires approval, but no log channel has been set up."


class ConfessionNotFoundError(ConfessionError):
    user_message = "This confession no longer exists."


class ConfessionAlreadyApprovedError(ConfessionError):
    user_message = "This confession has already been published."


class ConfessionPendingError(ConfessionError):
    user_message = "This confession has not been published yet."


class ConfessionDeliveryError(ConfessionError):
    """Discord recusou a mensagem (código numérico preservado)."""

    user_message = "Spectro could not deliver the confession to Discord."

    def __init__(self, code: int, user_message: str | None = None) -> None:
        super().__init__(user_message)
        self.code = code
