"""Erros e helpers de parsing para respostas de erro da API Discord."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ValidationError


class _DiscordErrorBody(BaseModel):
    code: int
    message: str


@dataclass(frozen=True)
class DiscordApiError:
    """Erro retornado pela API Discord (valor, não exceção).

    Attributes:
        status_code: Status HTTP da resposta
        code: Código numérico do Discord (ex: 50001 Missing Access)
        message: Mensagem do Discord
    """

    status_code: int
    code: int
    message: str

    @property
    def is_retryable(self) -> bool:
        """Rate limit e falhas do servidor podem ser tentados de novo pelo chamador."""
        return self.status_code == 429 or self.status_code >= 500


def parse_discord_error(status_code: int, body: bytes) -> DiscordApiError:
    """Extrai `{code, message}` do corpo de uma resposta de erro.

    Corpos fora do formato (ex: HTML de proxy) viram código 0 com o
    status HTTP na mensagem.

    Args:
        status_code: Status HTTP
        body: Corpo bruto da resposta

    Returns:
        DiscordApiError
    """
    try:
        parsed = _DiscordErrorBody.model_validate_json(body)
    except ValidationError:
        return DiscordApiError(
            status_code=status_code,
            code=0,
            message=f"unexpected_http_status_{status_code}",
        )
    return DiscordApiError(status_code=status_code, code=parsed.code, message=parsed.message)
