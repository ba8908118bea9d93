"""Dispatcher module."""

from .commands import CommandHandler, CommandRegistry, split_command
from .dispatcher import IDispatcher, UpdateDispatcher
from .pipeline import DEFAULT_QUEUE_SIZE, UpdatePipeline

__all__ = [
    "CommandHandler",
    "CommandRegistry",
    "split_command",
    "IDispatcher",
    "UpdateDispatcher",
    "UpdatePipeline",
    "DEFAULT_QUEUE_SIZE",
]
