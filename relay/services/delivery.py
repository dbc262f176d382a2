"""Bounded fire-and-forget delivery of channel notifications."""

from __future__ import annotations

import asyncio
from typing import Protocol

from relay.logging import get_logger
from relay.models import OutboundMessage
from relay.services.discord import Sender

logger = get_logger(__name__)


class Delivery(Protocol):
    def submit(self, message: OutboundMessage) -> bool: ...


class DeliveryQueue:
    """
    Queue drained by a fixed number of worker tasks.

    ``submit`` never blocks: when the queue is full the new message is dropped
    and logged. Failed sends are logged and not retried.
    """

    def __init__(
        self,
        sender: Sender,
        *,
        maxsize: int,
        workers: int,
    ) -> None:
        self._sender = sender
        self._queue: asyncio.Queue[OutboundMessage] = asyncio.Queue(maxsize=maxsize)
        self._worker_count = max(1, workers)
        self._tasks: list[asyncio.Task[None]] = []
        self.sent = 0
        self.failed = 0
        self.dropped = 0

    @property
    def maxsize(self) -> int:
        return self._queue.maxsize

    @property
    def worker_count(self) -> int:
        return self._worker_count

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def submit(self, message: OutboundMessage) -> bool:
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            self.dropped += 1
            logger.error(
                "delivery_queue_full",
                channel_id=message.destination_channel_id,
                maxsize=self._queue.maxsize,
            )
            return False
        logger.debug("notification_enqueued", channel_id=message.destination_channel_id)
        return True

    async def start(self) -> None:
        if self._tasks:
            return
        self._tasks = [
            asyncio.create_task(self._worker(), name=f"delivery-worker-{i}")
            for i in range(self._worker_count)
        ]

    async def join(self) -> None:
        """Wait until every queued message has been attempted."""
        await self._queue.join()

    async def stop(self) -> None:
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        if self.pending:
            logger.warning("delivery_queue_abandoned", pending=self.pending)

    async def _worker(self) -> None:
        while True:
            message = await self._queue.get()
            try:
                await self._sender(message)
            except Exception as exc:  # noqa: BLE001 - delivery is fire-and-forget
                self.failed += 1
                logger.error(
                    "delivery_failed",
                    channel_id=message.destination_channel_id,
                    error=str(exc),
                )
            else:
                self.sent += 1
                logger.info("notification_sent", channel_id=message.destination_channel_id)
            finally:
                self._queue.task_done()
