"""custom_id dos botões de moderação: `acao:internalId`."""

from __future__ import annotations

from app.constants.discord import ComponentAction
from utils.errors import InvariantViolationError

CUSTOM_ID_SEPARATOR = ":"


def build_custom_id(action: ComponentAction, internal_id: int) -> str:
    return f"{action.value}{CUSTOM_ID_SEPARATOR}{internal_id}"


def parse_custom_id(custom_id: str) -> tuple[str, int]:
    """Decodifica `acao:internalId`.

    A ação é devolvida como string; cabe ao chamador decidir se é conhecida.

    Raises:
        InvariantViolationError: Se o formato ou o ID forem inválidos
    """
    action, separator, raw_id = custom_id.partition(CUSTOM_ID_SEPARATOR)
    if not separator or not action or not (raw_id.isascii() and raw_id.isdigit()):
        raise InvariantViolationError(f"malformed custom id: {custom_id!r}")
    return action, int(raw_id)
