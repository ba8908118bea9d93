"""Wizardbot: a Telegram bot for MiniMax chat completions and content wizards."""

from .app import Application, IApplication
from .config import BotConfig
from .conversation import Conversation, ConversationStore
from .dispatcher import CommandRegistry, IDispatcher, UpdateDispatcher, UpdatePipeline
from .errors import (
    BotError,
    ConfigError,
    PollingError,
    RemoteAPIError,
    RequestError,
    TelegramAPIError,
    TransportError,
    ValidationError,
)
from .guards import ProcessingGuard, RateLimiter
from .llm import CompletionGateway, ICompletionGateway
from .telegram import ITelegramClient, LongPoller, TelegramClient
from .wizard import ContentType, WizardManager, WizardSession

__version__ = "1.0.0"

__all__ = [
    # Application
    "Application",
    "IApplication",
    "BotConfig",
    # Errors
    "BotError",
    "ConfigError",
    "ValidationError",
    "TransportError",
    "RequestError",
    "RemoteAPIError",
    "TelegramAPIError",
    "PollingError",
    # State
    "Conversation",
    "ConversationStore",
    "RateLimiter",
    "ProcessingGuard",
    "ContentType",
    "WizardManager",
    "WizardSession",
    # Components
    "CommandRegistry",
    "IDispatcher",
    "UpdateDispatcher",
    "UpdatePipeline",
    "ICompletionGateway",
    "CompletionGateway",
    "ITelegramClient",
    "TelegramClient",
    "LongPoller",
]
