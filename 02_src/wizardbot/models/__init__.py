"""Data models for wizardbot."""

from .chat import (
    ChatRef,
    NamedChat,
    NumericChat,
    chat_id_param,
    chat_ref,
    format_chat_id,
    is_valid_chat_id,
)
from .completion import (
    Role,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ChatMessage,
    Choice,
    CompletionParams,
    CompletionResult,
    Usage,
)
from .updates import CallbackQuery, Chat, InlineQuery, Message, Update, UpdateKind, User

__all__ = [
    # Chat references
    "ChatRef",
    "NumericChat",
    "NamedChat",
    "chat_ref",
    "chat_id_param",
    "format_chat_id",
    "is_valid_chat_id",
    # Completion
    "ChatMessage",
    "Role",
    "Choice",
    "CompletionParams",
    "CompletionResult",
    "Usage",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    # Updates
    "Update",
    "UpdateKind",
    "Message",
    "Chat",
    "User",
    "CallbackQuery",
    "InlineQuery",
]
