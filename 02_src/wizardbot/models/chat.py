"""Chat identifiers accepted by the messaging API."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumericChat:
    """A chat addressed by its numeric id."""

    id: int


@dataclass(frozen=True)
class NamedChat:
    """A public chat or channel addressed by ``@username``."""

    username: str


ChatRef = Union[NumericChat, NamedChat]


def chat_ref(value: "int | str | ChatRef") -> ChatRef:
    """Wrap a raw id or username into a ChatRef."""
    if isinstance(value, (NumericChat, NamedChat)):
        return value
    if isinstance(value, bool):
        raise TypeError("chat id must be int or str")
    if isinstance(value, int):
        return NumericChat(value)
    return NamedChat(value)


def format_chat_id(ref: ChatRef) -> str:
    """Render a ChatRef the way the API expects it in a request."""
    if isinstance(ref, NumericChat):
        return str(ref.id)
    return ref.username


def chat_id_param(ref: ChatRef) -> int | str:
    """JSON value for the ``chat_id`` request field."""
    if isinstance(ref, NumericChat):
        return ref.id
    return ref.username


def is_valid_chat_id(ref: ChatRef) -> bool:
    if isinstance(ref, NumericChat):
        return ref.id != 0
    return bool(ref.username.strip())
