"""Telegram transport module."""

from .client import API_URL, ITelegramClient, TelegramClient
from .formatting import truncate
from .poller import LongPoller

__all__ = [
    "API_URL",
    "ITelegramClient",
    "TelegramClient",
    "LongPoller",
    "truncate",
]
