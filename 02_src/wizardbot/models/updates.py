"""Inbound update models parsed from Telegram Bot API payloads."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


def _require_object(data: Any, name: str) -> dict[str, Any]:
    """Reject payload fields that are not JSON objects."""
    if not isinstance(data, dict):
        raise ValueError(f"{name}: expected an object, got {type(data).__name__}")
    return data


class UpdateKind(str, Enum):
    """Mutually exclusive classes of inbound events."""

    MESSAGE = "message"
    CALLBACK_QUERY = "callback_query"
    INLINE_QUERY = "inline_query"
    UNKNOWN = "unknown"


@dataclass
class User:
    """A Telegram user or bot."""

    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    language_code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        data = _require_object(data, "user")
        return cls(
            id=int(data.get("id", 0)),
            is_bot=bool(data.get("is_bot", False)),
            first_name=data.get("first_name", "") or "",
            last_name=data.get("last_name", "") or "",
            username=data.get("username", "") or "",
            language_code=data.get("language_code", "") or "",
        )


@dataclass
class Chat:
    """A Telegram chat."""

    id: int
    type: str = "private"
    title: str = ""
    username: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chat":
        data = _require_object(data, "chat")
        return cls(
            id=int(data.get("id", 0)),
            type=data.get("type", "private") or "private",
            title=data.get("title", "") or "",
            username=data.get("username", "") or "",
        )

    @property
    def is_private(self) -> bool:
        return self.type == "private"


@dataclass
class Message:
    """An inbound or sent chat message."""

    message_id: int
    chat: Chat
    from_user: User | None = None
    text: str = ""
    date: int = 0
    reply_to_message_id: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        data = _require_object(data, "message")
        reply_to = _require_object(data.get("reply_to_message") or {}, "reply_to_message")
        from_data = data.get("from")
        return cls(
            message_id=int(data.get("message_id", 0)),
            chat=Chat.from_dict(data.get("chat") or {}),
            from_user=User.from_dict(from_data) if from_data else None,
            text=data.get("text", "") or "",
            date=int(data.get("date", 0) or 0),
            reply_to_message_id=reply_to.get("message_id"),
        )


@dataclass
class CallbackQuery:
    """A button press on an inline keyboard."""

    id: str
    from_user: User
    data: str = ""
    message: Message | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CallbackQuery":
        data = _require_object(data, "callback_query")
        message = data.get("message")
        return cls(
            id=str(data.get("id", "")),
            from_user=User.from_dict(data.get("from") or {}),
            data=data.get("data", "") or "",
            message=Message.from_dict(message) if message else None,
        )


@dataclass
class InlineQuery:
    """A query typed after the bot's @username in any chat."""

    id: str
    from_user: User
    query: str = ""
    offset: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InlineQuery":
        data = _require_object(data, "inline_query")
        return cls(
            id=str(data.get("id", "")),
            from_user=User.from_dict(data.get("from") or {}),
            query=data.get("query", "") or "",
            offset=data.get("offset", "") or "",
        )


@dataclass
class Update:
    """One inbound event. At most one payload field is set."""

    update_id: int
    message: Message | None = None
    callback_query: CallbackQuery | None = None
    inline_query: InlineQuery | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Update":
        data = _require_object(data, "update")
        message = data.get("message")
        callback = data.get("callback_query")
        inline = data.get("inline_query")
        return cls(
            update_id=int(data.get("update_id", 0)),
            message=Message.from_dict(message) if message else None,
            callback_query=CallbackQuery.from_dict(callback) if callback else None,
            inline_query=InlineQuery.from_dict(inline) if inline else None,
        )

    @property
    def kind(self) -> UpdateKind:
        if self.message is not None:
            return UpdateKind.MESSAGE
        if self.callback_query is not None:
            return UpdateKind.CALLBACK_QUERY
        if self.inline_query is not None:
            return UpdateKind.INLINE_QUERY
        return UpdateKind.UNKNOWN
