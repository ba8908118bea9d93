"""Conversation module."""

from .store import Conversation, ConversationStore

__all__ = ["Conversation", "ConversationStore"]
