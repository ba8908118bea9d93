"""Bounded update queue and its sequential consumer."""

import asyncio
import logging

from ..errors import PollingError
from ..logging_config import get_logger
from ..models import Update
from .dispatcher import IDispatcher

DEFAULT_QUEUE_SIZE = 100


class UpdatePipeline:
    """Drains the update queue and dispatches one update at a time.

    A failing update is logged and skipped; it never stops the consumer.
    """

    def __init__(
        self,
        dispatcher: IDispatcher,
        maxsize: int = DEFAULT_QUEUE_SIZE,
        logger: logging.Logger | None = None,
    ):
        self._dispatcher = dispatcher
        self._queue: asyncio.Queue[Update] = asyncio.Queue(maxsize=maxsize)
        self._logger = logger or get_logger(__name__)
        self._task: asyncio.Task | None = None
        self._processed = 0
        self._failed = 0

    @property
    def queue(self) -> "asyncio.Queue[Update]":
        return self._queue

    @property
    def running(self) -> bool:
        return self._task is not None

    def stats(self) -> dict[str, int]:
        return {
            "queued": self._queue.qsize(),
            "processed": self._processed,
            "failed": self._failed,
        }

    async def submit(self, update: Update) -> None:
        """Enqueue an update, waiting while the queue is full."""
        await self._queue.put(update)

    async def start(self) -> None:
        if self._task is not None:
            raise PollingError("update pipeline already started")
        self._task = asyncio.create_task(self._consume(), name="update-consumer")

    async def stop(self) -> None:
        if self._task is None:
            raise PollingError("update pipeline not started")
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        finally:
            self._task = None

    async def join(self) -> None:
        """Wait until every queued update has been handled."""
        await self._queue.join()

    async def _consume(self) -> None:
        while True:
            update = await self._queue.get()
            try:
                await self._dispatcher.handle_update(update)
                self._processed += 1
            except Exception:
                self._failed += 1
                self._logger.exception("Error handling update %s", update.update_id)
            finally:
                self._queue.task_done()
