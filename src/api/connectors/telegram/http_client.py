"""Cliente HTTP especializado para a Telegram Bot API.

O token faz parte da URL (/bot<token>/<método>), então URLs nunca são
logadas; apenas o nome do método.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.bot_errors import parse_bot_api_error
from api.connectors.telegram.http_base import HttpClient, HttpClientConfig, HttpError
from utils.errors import TelegramApiError

if TYPE_CHECKING:
    import httpx

    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)


class TelegramHttpClient(HttpClient):
    """Cliente da Bot API com validação de token e de resposta."""

    def __init__(
        self,
        bot_token: str,
        api_base_url: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._bot_token = bot_token
        self._api_base_url = api_base_url.rstrip("/")

    async def call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Chama um método da Bot API e devolve o campo `result`.

        Raises:
            ValueError: Se o token do bot não estiver configurado.
            HttpError: Timeout ou falha de conexão.
            TelegramApiError: Resposta `ok: false` ou JSON inválido.
        """
        if not self._bot_token or not self._bot_token.strip():
            logger.error("telegram_token_missing", extra={"method": method})
            raise ValueError(
                "bot_token é obrigatório para chamar a Bot API. "
                "Verifique se TELEGRAM_BOT_TOKEN está configurado."
            )

        url = f"{self._api_base_url}/bot{self._bot_token}/{method}"
        try:
            response = await self.post(url, json=payload)
        except HttpError as exc:
            logger.warning(
                "telegram_http_failed",
                extra={
                    "method": method,
                    "error": str(exc),
                },
            )
            raise
        return self._process_response(response, method)

    async def send_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Envia mensagem (sendMessage) e devolve o Message criado."""
        return await self.call("sendMessage", payload)

    def _process_response(self, response: httpx.Response, method: str) -> dict[str, Any]:
        try:
            response_data = response.json()
        except json.JSONDecodeError as exc:
            logger.error("telegram_response_invalid_json", extra={"method": method})
            raise TelegramApiError(
                "Response JSON inválido", error_code=response.status_code
            ) from exc

        if not isinstance(response_data, dict):
            raise TelegramApiError("Response não é objeto", error_code=response.status_code)

        api_error = parse_bot_api_error(response_data)
        if api_error is not None:
            logger.warning(
                "telegram_api_error",
                extra={
                    "method": method,
                    "error_code": api_error.error_code,
                },
            )
            raise api_error

        logger.debug(
            "telegram_call_succeeded",
            extra={"method": method, "status_code": response.status_code},
        )
        result = response_data.get("result")
        return result if isinstance(result, dict) else {}


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
) -> TelegramHttpClient:
    """Factory do cliente com o timeout vindo das settings."""
    from config.settings import get_telegram_settings

    telegram = settings or get_telegram_settings()
    config = HttpClientConfig(timeout_seconds=telegram.request_timeout_seconds)
    return TelegramHttpClient(
        bot_token=telegram.bot_token,
        api_base_url=telegram.api_base_url,
        config=config,
    )
