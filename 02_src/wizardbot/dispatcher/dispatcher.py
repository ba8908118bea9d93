"""Update dispatcher: routes inbound events to commands, wizards or chat."""

import logging
import time
from typing import Any, Protocol

from ..config import BotConfig
from ..conversation import ConversationStore
from ..errors import BotError, RemoteAPIError, TransportError, ValidationError
from ..guards import Clock, ProcessingGuard, RateLimiter
from ..llm import ICompletionGateway
from ..logging_config import get_logger
from ..models import CallbackQuery, Chat, InlineQuery, Message, Update, UpdateKind, chat_ref
from ..telegram import ITelegramClient, truncate
from ..wizard import (
    WizardManager,
    WizardSession,
    build_quick_prompt,
    parse_create_args,
    resolve_content_type,
)
from . import texts
from .commands import COMMAND_PREFIX, CommandHandler, CommandRegistry, split_command

# Failures of a single completion that are reported back to the user.
COMPLETION_ERRORS = (RemoteAPIError, TransportError, ValidationError)


class IDispatcher(Protocol):
    """Consumer side of the update pipeline."""

    async def handle_update(self, update: Update) -> None:
        """Classify and route one inbound event."""
        ...


class UpdateDispatcher:
    """Owns all per-user state and routes each update.

    Free text is routed, first match wins: command, active wizard answer,
    then chat completion behind the rate limiter and processing guard.
    """

    def __init__(
        self,
        telegram: ITelegramClient,
        gateway: ICompletionGateway,
        config: BotConfig | None = None,
        clock: Clock = time.monotonic,
        logger: logging.Logger | None = None,
    ):
        self._telegram = telegram
        self._gateway = gateway
        self._config = config or BotConfig()
        self._logger = logger or get_logger(__name__)

        self._conversations = ConversationStore(default_system=self._config.system_prompt)
        self._rate_limiter = RateLimiter(interval=self._config.rate_limit, clock=clock)
        self._processing = ProcessingGuard(rate_limiter=self._rate_limiter)
        self._wizards = WizardManager(timeout=self._config.wizard_timeout, clock=clock)

        self._commands = CommandRegistry()
        self._register_default_commands()

    # Read-only views for status reporting and tests.
    @property
    def conversations(self) -> ConversationStore:
        return self._conversations

    @property
    def wizards(self) -> WizardManager:
        return self._wizards

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    @property
    def processing_guard(self) -> ProcessingGuard:
        return self._processing

    def stats(self) -> dict[str, Any]:
        return {
            "conversations": len(self._conversations),
            "wizard_sessions": self._wizards.active_count(),
            "commands": self._commands.names(),
        }

    def register_command(self, name: str, handler: CommandHandler) -> None:
        """Add a custom slash command or replace a default one."""
        self._commands.register(name, handler)

    async def handle_update(self, update: Update) -> None:
        kind = update.kind
        if kind is UpdateKind.MESSAGE:
            await self._handle_message(update.message)
        elif kind is UpdateKind.CALLBACK_QUERY:
            await self._handle_callback_query(update.callback_query)
        elif kind is UpdateKind.INLINE_QUERY:
            await self._handle_inline_query(update.inline_query)
        else:
            self._logger.debug("Unhandled update type: %s", update.update_id)

    # Access control

    def _is_chat_allowed(self, chat: Chat) -> bool:
        return chat.is_private or self._config.enable_group_chat

    def _is_user_allowed(self, user_id: int) -> bool:
        allowed = self._config.allowed_users
        if not allowed:
            return True
        return user_id in allowed or user_id in self._config.admin_user_ids

    # Messages

    async def _handle_message(self, msg: Message) -> None:
        if msg.from_user is None:
            return
        if not self._is_chat_allowed(msg.chat):
            self._logger.debug("Ignoring message from %s chat %s", msg.chat.type, msg.chat.id)
            return

        user_id = msg.from_user.id
        if not self._is_user_allowed(user_id):
            self._logger.info("Rejected message from unauthorized user %s", user_id)
            await self._send(msg.chat, texts.NOT_AUTHORIZED)
            return

        if msg.text.startswith(COMMAND_PREFIX):
            await self._handle_command(msg)
            return

        # An empty reply is a valid answer to an optional wizard question.
        wizard = self._wizards.get_wizard(user_id)
        if wizard is not None:
            await self._handle_wizard_answer(msg, wizard)
            return

        if not msg.text.strip():
            return

        if not self._rate_limiter.allow(user_id):
            await self._send(msg.chat, texts.RATE_LIMITED)
            return

        if not self._processing.try_begin(user_id):
            await self._send(msg.chat, texts.STILL_PROCESSING)
            return

        try:
            await self._chat(msg)
        finally:
            self._processing.end(user_id)

    async def _chat(self, msg: Message) -> None:
        """Append to history, ask for a completion and reply."""
        user_id = msg.from_user.id
        conversation = self._conversations.get_or_create(user_id)
        conversation.add_message("user", msg.text)

        notice = await self._send(msg.chat, texts.THINKING)

        try:
            result = await self._gateway.complete(conversation.build_context())
        except COMPLETION_ERRORS as e:
            self._logger.error("Completion error for %s: %s", user_id, e)
            await self._delete_notice(msg.chat, notice)
            await self._send(msg.chat, f"Sorry, I encountered an error: {e}")
            return

        await self._delete_notice(msg.chat, notice)

        reply = result.text
        if not reply:
            self._logger.warning("Empty completion for %s", user_id)
            return

        await self._send(msg.chat, reply)
        conversation.add_message("assistant", reply)

    async def _handle_wizard_answer(self, msg: Message, wizard: WizardSession) -> None:
        wizard.set_answer(wizard.get_current_key(), msg.text)

        if not wizard.is_complete():
            await self._send(
                msg.chat,
                f"Got it! {wizard.get_progress()}\n\n"
                f"{wizard.get_current_question()}\n\n"
                f"{texts.WIZARD_CANCEL_HINT}",
            )
            return

        prompt = wizard.build_prompt()
        self._wizards.end_wizard(wizard.user_id)
        self._conversations.clear(wizard.user_id)
        self._logger.info(
            "Wizard completed for %s (%s)", wizard.user_id, wizard.content_type.value
        )

        await self._send(msg.chat, texts.GENERATING_FROM_ANSWERS)
        await self._generate(msg.chat, prompt, error_prefix="Error generating content")

    async def _generate(self, chat: Chat, prompt: str, error_prefix: str) -> None:
        """One-shot completion of a synthesized prompt, outside the conversation."""
        try:
            result = await self._gateway.complete_prompt(prompt)
        except COMPLETION_ERRORS as e:
            self._logger.error("Content generation failed: %s", e)
            await self._send(chat, f"{error_prefix}: {e}")
            return

        if result.text:
            await self._send(chat, result.text)

    # Commands

    async def _handle_command(self, msg: Message) -> None:
        name, args = split_command(msg.text)
        if not name:
            return

        handler = self._commands.get(name)
        if handler is None:
            await self._send(msg.chat, f"Unknown command: /{name}")
            return

        self._logger.debug("Command /%s from %s", name, msg.from_user.id)
        await handler(msg, args)

    def _register_default_commands(self) -> None:
        self._commands.register("start", self._cmd_start)
        self._commands.register("help", self._cmd_help)
        self._commands.register("clear", self._cmd_clear)
        self._commands.register("status", self._cmd_status)
        self._commands.register("create", self._cmd_create)
        self._commands.register("cancel", self._cmd_cancel)

    async def _cmd_start(self, msg: Message, args: str) -> None:
        await self._send(msg.chat, texts.welcome_text(self._config.bot_name or "Minimax Bot"))

    async def _cmd_help(self, msg: Message, args: str) -> None:
        await self._send(msg.chat, texts.HELP_TEXT)

    async def _cmd_clear(self, msg: Message, args: str) -> None:
        self._conversations.clear(msg.from_user.id)
        await self._send(msg.chat, texts.CONVERSATION_CLEARED)

    async def _cmd_status(self, msg: Message, args: str) -> None:
        user_id = msg.from_user.id
        try:
            bot = await self._telegram.get_me()
            bot_name = f"@{bot.username}"
        except BotError as e:
            self._logger.error("Failed to get bot info: %s", e)
            bot_name = self._config.bot_name or "unknown"

        lines = [
            "Bot Status",
            "",
            f"Bot: {bot_name}",
            f"Model: {self._gateway.model}",
            f"Your messages in this conversation: {len(self._conversations.get_messages(user_id))}",
        ]
        wizard = self._wizards.get_wizard(user_id)
        if wizard is not None:
            lines.append(f"Active wizard: {wizard.content_type.value} {wizard.get_progress()}")
        await self._send(msg.chat, "\n".join(lines))

    async def _cmd_create(self, msg: Message, args: str) -> None:
        parsed = parse_create_args(args)
        if not parsed.content_type:
            await self._send(msg.chat, texts.create_usage_text())
            return

        content_type = resolve_content_type(parsed.content_type)
        if content_type is None:
            await self._send(msg.chat, texts.unknown_content_type_text(parsed.content_type))
            return

        if parsed.quick:
            await self._send(msg.chat, texts.GENERATING)
            await self._generate(msg.chat, build_quick_prompt(parsed.flags), error_prefix="Error")
            return

        wizard = self._wizards.start_wizard(msg.from_user.id, content_type)
        self._logger.info("Wizard started for %s (%s)", msg.from_user.id, content_type.value)
        await self._send(
            msg.chat,
            f"Starting {content_type.value} wizard! {wizard.get_progress()}\n\n"
            f"{wizard.get_current_question()}\n\n"
            f"{texts.WIZARD_CANCEL_HINT}",
        )

    async def _cmd_cancel(self, msg: Message, args: str) -> None:
        self._wizards.cancel_wizard(msg.from_user.id)
        await self._send(msg.chat, texts.WIZARD_CANCELLED)

    # Callback and inline queries

    async def _handle_callback_query(self, query: CallbackQuery) -> None:
        try:
            await self._telegram.answer_callback_query(query.id)
        except BotError as e:
            self._logger.error("Failed to answer callback query %s: %s", query.id, e)

        if query.data:
            self._logger.debug("Callback query from %s: %s", query.from_user.id, query.data)

    async def _handle_inline_query(self, query: InlineQuery) -> None:
        if not self._config.enable_inline_mode:
            return
        self._logger.debug("Inline query from %s: %s", query.from_user.username, query.query)

    # Outbound

    async def _send(self, chat: Chat, text: str) -> Message | None:
        """Send plain text; failures are logged and yield None."""
        text = truncate(text, self._config.max_message_length)
        try:
            return await self._telegram.send_message(
                chat_ref(chat.id), text, disable_web_page_preview=True
            )
        except BotError as e:
            self._logger.error("Failed to send message to %s: %s", chat.id, e)
            return None

    async def _delete_notice(self, chat: Chat, notice: Message | None) -> None:
        if notice is None:
            return
        try:
            await self._telegram.delete_message(chat_ref(chat.id), notice.message_id)
        except BotError as e:
            self._logger.warning("Failed to delete message %s: %s", notice.message_id, e)
