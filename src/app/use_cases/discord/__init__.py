"""Use cases específicos de Discord."""

from .dispatch_interaction import (
    CONFESS_COMMAND_NAME,
    DispatchError,
    InteractionDispatcher,
    UnknownCommandError,
    UnknownComponentActionError,
    UnsupportedInteractionTypeError,
)

__all__ = [
    "CONFESS_COMMAND_NAME",
    "DispatchError",
    "InteractionDispatcher",
    "UnknownCommandError",
    "UnknownComponentActionError",
    "UnsupportedInteractionTypeError",
]
