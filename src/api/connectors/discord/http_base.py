"""Cliente HTTP base (httpx) para chamadas à API Discord.

Uma única tentativa por chamada: política de retry pertence ao chamador,
já que o token de interação expira em segundos.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 2.5
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de transporte (timeout, conexão) sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa um POST sem retry.

        Raises:
            HttpError: Em timeout ou falha de conexão
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    files=files,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise HttpError("http_timeout", is_retryable=True) from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error", is_retryable=True) from exc
