"""Application bootstrap and lifecycle management."""

import math
from typing import Any, Protocol

from .config import BotConfig
from .dispatcher import UpdateDispatcher, UpdatePipeline
from .llm import CompletionGateway, ICompletionGateway
from .logging_config import get_logger
from .models import Update
from .telegram import ITelegramClient, LongPoller, TelegramClient

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def submit_update(self, update: Update) -> None:
        """Hand an inbound update to the pipeline (webhook mode)."""
        ...

    def status(self) -> dict[str, Any]:
        """Snapshot of runtime state."""
        ...

    @property
    def config(self) -> BotConfig:
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        config: BotConfig,
        telegram: ITelegramClient | None = None,
        gateway: ICompletionGateway | None = None,
    ):
        self._config = config
        self._telegram = telegram
        self._gateway = gateway
        self._owns_telegram = telegram is None
        self._owns_gateway = gateway is None

        # Components (will be initialized in start())
        self._dispatcher: UpdateDispatcher | None = None
        self._pipeline: UpdatePipeline | None = None
        self._poller: LongPoller | None = None
        self._bot_username = ""
        self._running = False

    @property
    def config(self) -> BotConfig:
        return self._config

    async def start(self) -> None:
        """Initialize components in dependency order."""
        if self._running:
            raise RuntimeError("Application already started")
        logger.info("Starting application")

        # 1. Transport clients (no dependencies)
        if self._telegram is None:
            self._telegram = TelegramClient(self._config.telegram_bot_token)
        if self._gateway is None:
            self._gateway = CompletionGateway(
                api_key=self._config.minimax_api_key,
                base_url=self._config.minimax_base_url,
                model=self._config.minimax_model,
                timeout=self._config.minimax_timeout,
            )

        try:
            bot = await self._telegram.get_me()
            self._bot_username = bot.username
            logger.info("Logged in as @%s (ID: %s)", bot.username, bot.id)
            logger.info("Completion client initialized with model: %s", self._gateway.model)

            # 2. Dispatcher (owns all per-user state)
            self._dispatcher = UpdateDispatcher(
                telegram=self._telegram,
                gateway=self._gateway,
                config=self._config,
            )

            # 3. Pipeline consumer
            self._pipeline = UpdatePipeline(self._dispatcher)
            await self._pipeline.start()

            # 4. Update source
            if self._config.webhook_mode:
                await self._telegram.set_webhook(
                    self._config.webhook_url, secret_token=self._config.webhook_secret
                )
                logger.info("Webhook registered at %s", self._config.webhook_url)
            else:
                await self._telegram.delete_webhook()
                self._poller = LongPoller(
                    self._telegram,
                    self._pipeline.queue,
                    timeout=max(1, math.ceil(self._config.poll_timeout)),
                )
                await self._poller.start()
        except BaseException:
            logger.error("Startup failed, shutting down")
            await self.stop()
            raise

        self._running = True
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._poller and self._poller.running:
            await self._poller.stop()
        if self._pipeline and self._pipeline.running:
            await self._pipeline.stop()
        if self._owns_gateway and self._gateway:
            await self._gateway.aclose()
        if self._owns_telegram and self._telegram:
            await self._telegram.aclose()
        self._running = False
        logger.info("Bot stopped")

    async def submit_update(self, update: Update) -> None:
        if not self._pipeline:
            raise RuntimeError("Application not started")
        await self._pipeline.submit(update)

    def status(self) -> dict[str, Any]:
        return {
            "running": self._running,
            "mode": "webhook" if self._config.webhook_mode else "polling",
            "bot": self._bot_username,
            "model": self._config.minimax_model,
            "cursor": self._poller.offset if self._poller else None,
            "pipeline": self._pipeline.stats() if self._pipeline else {},
            "dispatcher": self._dispatcher.stats() if self._dispatcher else {},
        }

    @property
    def dispatcher(self) -> UpdateDispatcher:
        """Get dispatcher instance."""
        if not self._dispatcher:
            raise RuntimeError("Application not started")
        return self._dispatcher

    @property
    def pipeline(self) -> UpdatePipeline:
        """Get pipeline instance."""
        if not self._pipeline:
            raise RuntimeError("Application not started")
        return self._pipeline
