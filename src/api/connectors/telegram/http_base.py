"""Transporte HTTP (httpx) da Bot API.

Cada chamada é uma única tentativa. Update não respondido fica sem
resposta; não há fila nem nova tentativa.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Timeout e verificação TLS do transporte."""

    timeout_seconds: float = 30.0
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de transporte. A mensagem nunca inclui a URL (que contém o token)."""


class HttpClient:
    """POST JSON de tentativa única."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post(self, url: str, json: dict[str, Any]) -> httpx.Response:
        """Envia o JSON e devolve a resposta, qualquer que seja o status.

        Raises:
            HttpError: Timeout ou falha de conexão/protocolo.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            ) as client:
                return await client.post(url, json=json)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.debug("http_transport_failed", extra={"error_type": type(exc).__name__})
            raise HttpError("http_transport_error") from exc
