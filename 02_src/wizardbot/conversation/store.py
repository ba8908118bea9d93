"""Per-user conversation history."""

import threading

from ..models import ChatMessage, Role


class Conversation:
    """Ordered message history plus an optional system prompt."""

    def __init__(self, system: str = ""):
        self._lock = threading.Lock()
        self._messages: list[ChatMessage] = []
        self._system = system

    def add_message(self, role: Role, content: str) -> None:
        """Append a message to the history."""
        with self._lock:
            self._messages.append(ChatMessage(role=role, content=content))

    def get_messages(self) -> list[ChatMessage]:
        """Independent copy of the history in insertion order."""
        with self._lock:
            return [ChatMessage(m.role, m.content) for m in self._messages]

    def clear(self) -> None:
        """Empty the history. The system prompt is kept."""
        with self._lock:
            self._messages.clear()

    def set_system(self, text: str) -> None:
        with self._lock:
            self._system = text

    @property
    def system(self) -> str:
        with self._lock:
            return self._system

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def build_context(self) -> list[ChatMessage]:
        """History prefixed with the system prompt, ready for a completion request."""
        with self._lock:
            messages = [ChatMessage(m.role, m.content) for m in self._messages]
            if self._system:
                messages.insert(0, ChatMessage(role="system", content=self._system))
            return messages


class ConversationStore:
    """Lazily created conversations keyed by user id."""

    def __init__(self, default_system: str = ""):
        self._lock = threading.Lock()
        self._conversations: dict[int, Conversation] = {}
        self._default_system = default_system

    def get_or_create(self, user_id: int) -> Conversation:
        with self._lock:
            conversation = self._conversations.get(user_id)
            if conversation is None:
                conversation = Conversation(system=self._default_system)
                self._conversations[user_id] = conversation
            return conversation

    def get_messages(self, user_id: int) -> list[ChatMessage]:
        """Snapshot of a user's history; empty if the user has none."""
        with self._lock:
            conversation = self._conversations.get(user_id)
        if conversation is None:
            return []
        return conversation.get_messages()

    def clear(self, user_id: int) -> None:
        """Drop a user's conversation. No-op when absent."""
        with self._lock:
            self._conversations.pop(user_id, None)

    def __contains__(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._conversations

    def __len__(self) -> int:
        with self._lock:
            return len(self._conversations)
