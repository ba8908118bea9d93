"""Long-polling fetch task feeding the update queue."""

import asyncio
import logging

from ..errors import BotError, PollingError
from ..logging_config import get_logger
from ..models import Update
from .client import ITelegramClient

DEFAULT_POLL_TIMEOUT = 30
DEFAULT_POLL_LIMIT = 100
DEFAULT_RETRY_DELAY = 1.0


class LongPoller:
    """Fetches update batches and publishes them one at a time onto a queue.

    The cursor only advances once an update has been queued, so a fetch
    interrupted by shutdown re-delivers from the first unqueued update.
    """

    def __init__(
        self,
        client: ITelegramClient,
        queue: "asyncio.Queue[Update]",
        timeout: int = DEFAULT_POLL_TIMEOUT,
        limit: int = DEFAULT_POLL_LIMIT,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        logger: logging.Logger | None = None,
    ):
        self._client = client
        self._queue = queue
        self._timeout = timeout
        self._limit = limit
        self._retry_delay = retry_delay
        self._logger = logger or get_logger(__name__)

        self._offset = 0
        self._task: asyncio.Task | None = None
        self._stop_event = asyncio.Event()

    @property
    def offset(self) -> int:
        """Cursor for the next fetch: highest seen update id plus one."""
        return self._offset

    @property
    def running(self) -> bool:
        return self._task is not None

    async def start(self) -> None:
        if self._task is not None:
            raise PollingError("long polling already started")

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run(), name="telegram-long-poll")
        self._logger.info("Long polling started (offset=%s)", self._offset)

    async def stop(self) -> None:
        """Signal the fetch task, cancel any in-flight request and wait for exit."""
        if self._task is None:
            raise PollingError("long polling not started")

        self._stop_event.set()
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        finally:
            self._task = None
        self._logger.info("Long polling stopped (offset=%s)", self._offset)

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                updates = await self._client.get_updates(
                    offset=self._offset, limit=self._limit, timeout=self._timeout
                )
            except BotError as e:
                if self._stop_event.is_set():
                    return
                self._logger.error("Error getting updates: %s", e)
                if await self._wait_for_stop(self._retry_delay):
                    return
                continue

            for update in updates:
                if self._stop_event.is_set():
                    return
                await self._queue.put(update)
                self._offset = max(self._offset, update.update_id + 1)

    async def _wait_for_stop(self, delay: float) -> bool:
        """Sleep up to ``delay``; True if stop was signalled meanwhile."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=delay)
            return True
        except asyncio.TimeoutError:
            return False
