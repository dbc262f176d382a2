"""Tests for the bounded delivery queue."""

import asyncio

from relay.errors import DeliveryError
from relay.models import OutboundMessage
from relay.services.delivery import DeliveryQueue


def _message(channel: str = "999") -> OutboundMessage:
    return OutboundMessage(destination_channel_id=channel, content="hello")


class TestDeliveryQueue:
    async def test_messages_are_sent(self) -> None:
        sent: list[OutboundMessage] = []

        async def sender(message: OutboundMessage) -> None:
            sent.append(message)

        queue = DeliveryQueue(sender, maxsize=10, workers=2)
        await queue.start()
        assert queue.submit(_message("1"))
        assert queue.submit(_message("2"))
        await queue.join()
        await queue.stop()

        assert sorted(m.destination_channel_id for m in sent) == ["1", "2"]
        assert queue.sent == 2
        assert queue.failed == 0

    async def test_failures_are_counted_not_raised(self) -> None:
        async def sender(message: OutboundMessage) -> None:
            raise DeliveryError("Discord error: 403 Missing Access")

        queue = DeliveryQueue(sender, maxsize=10, workers=1)
        await queue.start()
        queue.submit(_message())
        queue.submit(_message())
        await queue.join()
        await queue.stop()

        assert queue.failed == 2
        assert queue.sent == 0

    async def test_failure_does_not_stop_worker(self) -> None:
        sent: list[str] = []

        async def sender(message: OutboundMessage) -> None:
            if message.destination_channel_id == "bad":
                raise RuntimeError("boom")
            sent.append(message.destination_channel_id)

        queue = DeliveryQueue(sender, maxsize=10, workers=1)
        await queue.start()
        queue.submit(_message("bad"))
        queue.submit(_message("good"))
        await queue.join()
        await queue.stop()

        assert sent == ["good"]

    async def test_full_queue_drops_new_messages(self) -> None:
        release = asyncio.Event()

        async def sender(message: OutboundMessage) -> None:
            await release.wait()

        queue = DeliveryQueue(sender, maxsize=1, workers=1)
        assert queue.submit(_message("1"))
        assert not queue.submit(_message("2"))
        assert queue.dropped == 1
        assert queue.pending == 1

        await queue.start()
        release.set()
        await queue.join()
        await queue.stop()
        assert queue.sent == 1

    async def test_submit_does_not_wait_for_send(self) -> None:
        started = asyncio.Event()
        release = asyncio.Event()

        async def sender(message: OutboundMessage) -> None:
            started.set()
            await release.wait()

        queue = DeliveryQueue(sender, maxsize=5, workers=1)
        await queue.start()
        assert queue.submit(_message())
        await asyncio.wait_for(started.wait(), timeout=1)
        assert queue.sent == 0
        release.set()
        await queue.join()
        await queue.stop()
        assert queue.sent == 1

    async def test_stop_is_safe_without_start(self) -> None:
        async def sender(message: OutboundMessage) -> None:
            return None

        queue = DeliveryQueue(sender, maxsize=1, workers=1)
        await queue.stop()


def test_app_builds_queue_from_settings() -> None:
    from fastapi.testclient import TestClient

    from relay.app import create_app
    from relay.config import Settings

    app = create_app(Settings(delivery_queue_size=3, delivery_workers=1))
    with TestClient(app):
        queue = app.state.delivery
        assert queue.maxsize == 3
        assert queue.worker_count == 1
