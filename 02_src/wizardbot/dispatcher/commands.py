"""Slash-command registry."""

from typing import Awaitable, Callable

from ..models import Message

CommandHandler = Callable[[Message, str], Awaitable[None]]

COMMAND_PREFIX = "/"


def split_command(text: str) -> tuple[str, str]:
    """Split ``"/Name@bot arg1 arg2"`` into ``("name", "arg1 arg2")``.

    Returns an empty name when ``text`` holds nothing after the prefix.
    """
    parts = text.strip()[len(COMMAND_PREFIX):].split()
    if not parts:
        return "", ""
    name = parts[0].split("@", 1)[0].lower()
    return name, " ".join(parts[1:])


class CommandRegistry:
    """Case-insensitive mapping of command names to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        """Add or replace a command. A leading ``/`` is ignored."""
        self._handlers[name.lstrip(COMMAND_PREFIX).lower()] = handler

    def get(self, name: str) -> CommandHandler | None:
        return self._handlers.get(name.lower())

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers
