"""Decodificação das interações verificadas em variantes tipadas.

Tudo ou nada: um payload que não corresponde integralmente a uma
variante conhecida é rejeitado, nunca parcialmente aceito.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from app.domain.interaction import Interaction

logger = logging.getLogger(__name__)

_INTERACTION_ADAPTER: TypeAdapter[Interaction] = TypeAdapter(Interaction)


class InteractionValidationError(ValueError):
    """Payload não corresponde a nenhuma variante de interação.

    Attributes:
        path: Caminho do primeiro campo inválido (ex: "2.member.user.id")
        error_type: Tipo do erro do pydantic (ex: "missing", "union_tag_invalid")
        error_count: Total de erros encontrados
    """

    def __init__(self, path: str, error_type: str, error_count: int = 1) -> None:
        super().__init__(f"invalid interaction at '{path or '<root>'}': {error_type}")
        self.path = path
        self.error_type = error_type
        self.error_count = error_count


def decode_interaction(raw: bytes | str) -> Interaction:
    """Valida o JSON bruto contra a união discriminada de interações.

    Args:
        raw: Corpo JSON já autenticado

    Raises:
        InteractionValidationError: JSON inválido, `type` ausente ou
            desconhecido, campo obrigatório ausente ou com tipo errado

    Returns:
        Variante tipada de Interaction
    """
    try:
        return _INTERACTION_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_input=False)
        first = errors[0]
        path = ".".join(str(part) for part in first["loc"])
        logger.info(
            "interaction_decode_failed",
            extra={
                "path": path,
                "error_type": first["type"],
                "error_count": exc.error_count(),
            },
        )
        raise InteractionValidationError(path, first["type"], exc.error_count()) from exc
