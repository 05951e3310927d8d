"""
Client HTTP da Telegram Bot API.

Usa httpx.AsyncClient persistente (pool de conexoes) e converte respostas
ok=false em TelegramAPIError. Erros de rede (httpx.HTTPError) sao
propagados; quem chama decide se loga ou encerra.
"""

from typing import Any, Optional

import httpx

from projects.board.bot.schemas import Message, Update, User
from shared.core.exceptions import TelegramAPIError
from shared.core.logging import get_logger

logger = get_logger(__name__)

# Margem sobre o timeout do long polling para a requisicao HTTP
_POLL_MARGIN_SECONDS = 10.0
_DEFAULT_TIMEOUT_SECONDS = 30.0


class TelegramClient:
    """Operações da Bot API usadas pelo bot."""

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.telegram.org",
        poll_timeout: int = 50,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.poll_timeout = poll_timeout
        self._client = http_client or httpx.AsyncClient(
            base_url=f"{api_url.rstrip('/')}/bot{token}/",
            timeout=_DEFAULT_TIMEOUT_SECONDS,
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, http_timeout: Optional[float] = None, **params) -> Any:
        payload = {key: value for key, value in params.items() if value is not None}
        response = await self._client.post(
            method,
            json=payload,
            timeout=http_timeout or _DEFAULT_TIMEOUT_SECONDS,
        )

        try:
            data = response.json()
        except ValueError:
            raise TelegramAPIError(
                method, f"HTTP {response.status_code}", response.status_code
            )

        if not data.get("ok"):
            raise TelegramAPIError(
                method,
                data.get("description", f"HTTP {response.status_code}"),
                data.get("error_code"),
            )
        return data.get("result")

    async def get_me(self) -> User:
        return User.model_validate(await self._call("getMe"))

    async def get_updates(self, offset: Optional[int] = None) -> list[Update]:
        """Long polling de updates a partir de offset."""
        result = await self._call(
            "getUpdates",
            http_timeout=self.poll_timeout + _POLL_MARGIN_SECONDS,
            offset=offset,
            timeout=self.poll_timeout,
            allowed_updates=["message", "callback_query"],
        )
        return [Update.model_validate(item) for item in result or []]

    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_markup: Optional[dict] = None,
    ) -> Message:
        result = await self._call(
            "sendMessage", chat_id=chat_id, text=text, reply_markup=reply_markup
        )
        return Message.model_validate(result)

    async def edit_message_text(
        self,
        chat_id: int,
        message_id: int,
        text: str,
        reply_markup: Optional[dict] = None,
    ) -> None:
        await self._call(
            "editMessageText",
            chat_id=chat_id,
            message_id=message_id,
            text=text,
            reply_markup=reply_markup,
        )

    async def delete_message(self, chat_id: int, message_id: int) -> None:
        await self._call("deleteMessage", chat_id=chat_id, message_id=message_id)

    async def answer_callback_query(
        self, callback_query_id: str, text: Optional[str] = None
    ) -> None:
        await self._call(
            "answerCallbackQuery", callback_query_id=callback_query_id, text=text
        )
