"""GitHub webhook endpoint."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Header
from fastapi.responses import PlainTextResponse

from relay.config import Settings
from relay.dependencies import get_delivery, get_registry, get_settings, verified_github_body
from relay.errors import UnsupportedEvent
from relay.logging import get_logger
from relay.models import EventKind
from relay.services.delivery import Delivery
from relay.services.dispatch import DispatchContext, dispatch
from relay.services.events import parse_github_event
from relay.services.registry import RoutingRuleStore

logger = get_logger(__name__)

router = APIRouter(tags=["github"])


@router.post("/github-webhook", response_class=PlainTextResponse)
async def github_webhook(
    body: bytes = Depends(verified_github_body),
    x_github_event: str | None = Header(None),
    registry: RoutingRuleStore = Depends(get_registry),
    delivery: Delivery = Depends(get_delivery),
    cfg: Settings = Depends(get_settings),
):
    """
    GitHub webhook endpoint.

    Push and pull_request deliveries for a configured repository are turned
    into a channel message and queued for delivery; the response never waits
    for, or reports on, the send. Anything else is acknowledged and dropped.
    """
    event_name = x_github_event or "unknown"
    try:
        payload = json.loads(body)
    except ValueError:
        # pings need no payload
        logger.debug("github_payload_not_json", github_event=event_name)
        payload = None

    try:
        event = parse_github_event(event_name, payload)
    except UnsupportedEvent as exc:
        logger.info("github_event_ignored", github_event=event_name, reason=exc.message)
        return "ignored"

    outcome = dispatch(event, DispatchContext(registry=registry, public_url=cfg.public_url))
    if outcome.kind is EventKind.PING:
        return "pong"
    if outcome.notification is None:
        return "No config for this repo"

    delivery.submit(outcome.notification)
    logger.info(
        "github_notification_queued",
        github_event=event_name,
        channel_id=outcome.notification.destination_channel_id,
    )
    return "OK"
