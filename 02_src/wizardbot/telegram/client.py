"""Telegram Bot API client."""

import asyncio
import logging
from typing import Any, Protocol

import httpx

from ..errors import TelegramAPIError, TransportError
from ..logging_config import get_logger
from ..models import ChatRef, Message, Update, User, chat_id_param

API_URL = "https://api.telegram.org"

# Extra read time on top of the server-side long-poll hold.
POLL_TIMEOUT_MARGIN = 10.0


class ITelegramClient(Protocol):
    """Outbound primitives the dispatcher and poller rely on."""

    async def get_me(self) -> User:
        ...

    async def send_message(
        self,
        chat: ChatRef,
        text: str,
        disable_web_page_preview: bool = True,
        reply_to_message_id: int | None = None,
        parse_mode: str | None = None,
    ) -> Message:
        ...

    async def delete_message(self, chat: ChatRef, message_id: int) -> bool:
        ...

    async def answer_callback_query(self, callback_query_id: str, text: str = "") -> bool:
        ...

    async def get_updates(
        self, offset: int = 0, limit: int = 100, timeout: int = 30
    ) -> list[Update]:
        ...

    async def set_webhook(self, url: str, secret_token: str = "") -> bool:
        ...

    async def delete_webhook(self, drop_pending_updates: bool = False) -> bool:
        ...

    async def aclose(self) -> None:
        ...


class TelegramClient:
    """Async Bot API client. Every method POSTs JSON to ``/bot<token>/<method>``."""

    def __init__(
        self,
        token: str,
        base_url: str = API_URL,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ):
        if not token:
            raise ValueError("bot token is required")

        self._base_url = f"{base_url.rstrip('/')}/bot{token}"
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logger or get_logger(__name__)
        self._bot_info: User | None = None
        self._bot_info_lock = asyncio.Lock()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Invoke an API method and return the ``result`` field."""
        url = f"{self._base_url}/{method}"
        try:
            response = await self._client.post(
                url, json=params or {}, timeout=timeout or self._timeout
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{method}: failed to send request: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                f"{method}: failed to decode response (HTTP {response.status_code})"
            ) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"{method}: unexpected response body (HTTP {response.status_code})"
            )

        if not payload.get("ok"):
            parameters = payload.get("parameters") or {}
            raise TelegramAPIError(
                code=int(payload.get("error_code", response.status_code) or 0),
                description=payload.get("description", ""),
                retry_after=parameters.get("retry_after"),
            )

        return payload.get("result")

    async def get_me(self) -> User:
        """Bot identity, cached after the first successful call."""
        async with self._bot_info_lock:
            if self._bot_info is None:
                result = await self._call("getMe")
                self._bot_info = User.from_dict(result or {})
            return self._bot_info

    async def send_message(
        self,
        chat: ChatRef,
        text: str,
        disable_web_page_preview: bool = True,
        reply_to_message_id: int | None = None,
        parse_mode: str | None = None,
    ) -> Message:
        params: dict[str, Any] = {"chat_id": chat_id_param(chat), "text": text}
        if disable_web_page_preview:
            params["disable_web_page_preview"] = True
        if reply_to_message_id:
            params["reply_to_message_id"] = reply_to_message_id
        if parse_mode:
            params["parse_mode"] = parse_mode
        result = await self._call("sendMessage", params)
        return Message.from_dict(result or {})

    async def delete_message(self, chat: ChatRef, message_id: int) -> bool:
        result = await self._call(
            "deleteMessage", {"chat_id": chat_id_param(chat), "message_id": message_id}
        )
        return bool(result)

    async def answer_callback_query(self, callback_query_id: str, text: str = "") -> bool:
        params: dict[str, Any] = {"callback_query_id": callback_query_id}
        if text:
            params["text"] = text
        return bool(await self._call("answerCallbackQuery", params))

    async def get_updates(
        self, offset: int = 0, limit: int = 100, timeout: int = 30
    ) -> list[Update]:
        """Long-poll for updates starting at ``offset``."""
        params: dict[str, Any] = {"limit": limit, "timeout": timeout}
        if offset:
            params["offset"] = offset
        result = await self._call(
            "getUpdates", params, timeout=timeout + POLL_TIMEOUT_MARGIN
        )
        try:
            return [Update.from_dict(item) for item in result or []]
        except (TypeError, ValueError) as e:
            raise TransportError(f"getUpdates: malformed update: {e}") from e

    async def set_webhook(self, url: str, secret_token: str = "") -> bool:
        params: dict[str, Any] = {"url": url}
        if secret_token:
            params["secret_token"] = secret_token
        return bool(await self._call("setWebhook", params))

    async def delete_webhook(self, drop_pending_updates: bool = False) -> bool:
        return bool(
            await self._call(
                "deleteWebhook", {"drop_pending_updates": drop_pending_updates}
            )
        )
