"""Chat-completion gateway for the MiniMax API."""

import json
import logging
from typing import Any, Awaitable, Callable, Protocol

import httpx

from ..errors import RemoteAPIError, RequestError, ValidationError
from ..logging_config import get_logger
from ..models import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ChatMessage,
    CompletionParams,
    CompletionResult,
)

CHAT_COMPLETION_PATH = "/text/chatcompletion_v2"

ChunkSink = Callable[[str], Awaitable[None]]


class ICompletionGateway(Protocol):
    """Stateless access to the chat-completion backend."""

    async def complete(
        self,
        messages: list[ChatMessage],
        params: CompletionParams | None = None,
    ) -> CompletionResult:
        """Issue one request and return the parsed response."""
        ...

    async def complete_prompt(
        self,
        prompt: str,
        params: CompletionParams | None = None,
    ) -> CompletionResult:
        """Complete a single synthesized user prompt."""
        ...

    async def stream(
        self,
        messages: list[ChatMessage],
        sink: ChunkSink,
        params: CompletionParams | None = None,
    ) -> str:
        """Deliver text fragments to ``sink`` as they arrive."""
        ...

    @property
    def model(self) -> str:
        ...

    async def aclose(self) -> None:
        ...


class CompletionGateway:
    """MiniMax chat-completion client over httpx."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.minimax.chat/v1",
        model: str = "abab5.5-chat",
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ):
        if not api_key:
            raise ValueError("api key is required")

        self._api_key = api_key
        self._url = base_url.rstrip("/") + CHAT_COMPLETION_PATH
        self._model = model
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logger or get_logger(__name__)

    @property
    def model(self) -> str:
        return self._model

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    def _build_request(
        self,
        messages: list[ChatMessage],
        params: CompletionParams | None,
        stream: bool,
    ) -> dict[str, Any]:
        if not messages:
            raise ValidationError("no messages provided")

        params = params or CompletionParams()
        body: dict[str, Any] = {
            "model": self._model,
            "messages": [m.to_dict() for m in messages],
            "temperature": params.temperature if params.temperature > 0 else DEFAULT_TEMPERATURE,
            "max_tokens": params.max_tokens if params.max_tokens > 0 else DEFAULT_MAX_TOKENS,
            "stream": stream,
        }
        if params.top_p > 0:
            body["top_p"] = params.top_p
        return body

    @staticmethod
    def _raise_for_error(status_code: int, raw: bytes) -> None:
        """Map a non-2xx response to RemoteAPIError."""
        try:
            payload = json.loads(raw)
        except ValueError:
            payload = None

        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            raise RemoteAPIError(
                code=error.get("code") or status_code,
                description=error.get("message", ""),
                status_code=status_code,
                error_type=error.get("type", ""),
            )
        raise RemoteAPIError(
            code=status_code,
            description=raw.decode("utf-8", errors="replace"),
            status_code=status_code,
        )

    @staticmethod
    def _check_base_resp(payload: dict[str, Any]) -> None:
        """MiniMax reports some failures in a 200 body under ``base_resp``."""
        if not isinstance(payload, dict):
            raise RequestError("unexpected response body: expected a JSON object")
        base_resp = payload.get("base_resp") or {}
        status = base_resp.get("status_code", 0)
        if status:
            raise RemoteAPIError(code=status, description=base_resp.get("status_msg", ""))

    async def complete(
        self,
        messages: list[ChatMessage],
        params: CompletionParams | None = None,
    ) -> CompletionResult:
        body = self._build_request(messages, params, stream=False)
        self._logger.debug(
            "Completion request: model=%s messages=%s", self._model, len(messages)
        )

        try:
            response = await self._client.post(
                self._url, json=body, headers=self._headers(), timeout=self._timeout
            )
        except httpx.HTTPError as e:
            raise RequestError(f"failed to send request: {e}") from e

        if response.status_code != 200:
            self._raise_for_error(response.status_code, response.content)

        try:
            payload = response.json()
        except ValueError as e:
            raise RequestError(f"failed to decode response: {e}") from e

        self._check_base_resp(payload)
        result = CompletionResult.from_dict(payload)
        self._logger.debug(
            "Completion done: choices=%s total_tokens=%s",
            len(result.choices),
            result.usage.total_tokens,
        )
        return result

    async def complete_prompt(
        self,
        prompt: str,
        params: CompletionParams | None = None,
    ) -> CompletionResult:
        return await self.complete([ChatMessage(role="user", content=prompt)], params)

    async def stream(
        self,
        messages: list[ChatMessage],
        sink: ChunkSink,
        params: CompletionParams | None = None,
    ) -> str:
        """Stream a completion, calling ``sink`` once per text fragment.

        Stops at ``[DONE]``, at the first finish reason, or at end of stream.
        An exception raised by ``sink`` aborts the stream and propagates.
        Returns the concatenated text.
        """
        body = self._build_request(messages, params, stream=True)
        fragments: list[str] = []

        try:
            async with self._client.stream(
                "POST", self._url, json=body, headers=self._headers(), timeout=self._timeout
            ) as response:
                if response.status_code != 200:
                    raw = await response.aread()
                    self._raise_for_error(response.status_code, raw)

                async for line in response.aiter_lines():
                    line = line.strip()
                    if not line:
                        continue
                    if line.startswith("data:"):
                        line = line[len("data:"):].strip()
                    if line == "[DONE]":
                        break

                    try:
                        chunk = json.loads(line)
                    except ValueError as e:
                        raise RequestError(f"failed to decode chunk: {e}") from e

                    self._check_base_resp(chunk)
                    choices = chunk.get("choices")
                    if not isinstance(choices, list) or not choices:
                        continue
                    if not isinstance(choices[0], dict):
                        continue

                    delta = choices[0].get("delta") or {}
                    content = delta.get("content") or ""
                    if content:
                        fragments.append(content)
                        await sink(content)

                    if choices[0].get("finish_reason"):
                        break
        except httpx.HTTPError as e:
            raise RequestError(f"stream failed: {e}") from e

        return "".join(fragments)
