"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApprovalLogUnavailableError,
    ChannelDisabledError,
    ChannelNotConfiguredError,
    ConfessionAlreadyApprovedError,
    ConfessionDeliveryError,
    ConfessionError,
    ConfessionNotFoundError,
    ConfessionPendingError,
    ContinuationTokenConsumedError,
    ContinuationTokenError,
    ContinuationTokenExpiredError,
    InvariantViolationError,
)

__all__ = [
    "ApprovalLogUnavailableError",
    "ChannelDisabledError",
    "ChannelNotConfiguredError",
    "ConfessionAlreadyApprovedError",
    "ConfessionDeliveryError",
    "ConfessionError",
    "ConfessionNotFoundError",
    "ConfessionPendingError",
    "ContinuationTokenConsumedError",
    "ContinuationTokenError",
    "ContinuationTokenExpiredError",
    "InvariantViolationError",
]
