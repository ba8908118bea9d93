"""Pytest configuration and fixtures."""

import asyncio
import itertools
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from wizardbot.config import BotConfig  # noqa: E402
from wizardbot.models import (  # noqa: E402
    ChatMessage,
    Choice,
    CompletionResult,
    Chat,
    Message,
    Update,
    Usage,
    User,
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def completion(text: str) -> CompletionResult:
    return CompletionResult(
        id="resp-1",
        model="abab5.5-chat",
        choices=[Choice(index=0, message=ChatMessage("assistant", text), finish_reason="stop")],
        usage=Usage(prompt_tokens=10, completion_tokens=5, total_tokens=15),
    )


@pytest.fixture
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def config():
    """Create a valid config."""
    return BotConfig(telegram_bot_token="test_token", minimax_api_key="test_key")


@pytest.fixture
def mock_telegram():
    """Create mock Telegram client that echoes sent messages back."""
    ids = itertools.count(100)
    telegram = Mock()

    async def send_message(chat, text, **kwargs):
        return Message(message_id=next(ids), chat=Chat(id=chat.id), text=text)

    telegram.send_message = AsyncMock(side_effect=send_message)
    telegram.delete_message = AsyncMock(return_value=True)
    telegram.answer_callback_query = AsyncMock(return_value=True)
    telegram.get_me = AsyncMock(return_value=User(id=1, is_bot=True, username="test_bot"))

    async def get_updates(offset=0, limit=100, timeout=30):
        # Stand-in for the server-side long-poll hold.
        await asyncio.sleep(0.01)
        return []

    telegram.get_updates = AsyncMock(side_effect=get_updates)
    telegram.set_webhook = AsyncMock(return_value=True)
    telegram.delete_webhook = AsyncMock(return_value=True)
    telegram.aclose = AsyncMock()
    return telegram


@pytest.fixture
def mock_gateway():
    """Create mock completion gateway."""
    gateway = Mock()
    gateway.model = "abab5.5-chat"
    gateway.complete = AsyncMock(return_value=completion("Test response"))
    gateway.complete_prompt = AsyncMock(return_value=completion("Generated content"))
    gateway.aclose = AsyncMock()
    return gateway


@pytest.fixture
def dispatcher(mock_telegram, mock_gateway, config, clock):
    """Create dispatcher with mocked collaborators."""
    from wizardbot.dispatcher import UpdateDispatcher

    return UpdateDispatcher(
        telegram=mock_telegram,
        gateway=mock_gateway,
        config=config,
        clock=clock,
    )


@pytest.fixture
def make_update():
    """Factory for message updates."""
    ids = itertools.count(1)

    def _make(text: str, user_id: int = 42, chat_id: int | None = None, chat_type: str = "private"):
        return Update(
            update_id=next(ids),
            message=Message(
                message_id=next(ids),
                chat=Chat(id=chat_id if chat_id is not None else user_id, type=chat_type),
                from_user=User(id=user_id, first_name="Test", username="tester"),
                text=text,
            ),
        )

    return _make


@pytest.fixture
def sent_texts(mock_telegram):
    """Return the texts passed to send_message so far."""

    def _texts() -> list[str]:
        return [call.args[1] for call in mock_telegram.send_message.call_args_list]

    return _texts


@pytest.fixture
def make_completion():
    """Factory for completion results."""
    return completion
