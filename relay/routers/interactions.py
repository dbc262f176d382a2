"""Discord interactions endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from relay.config import Settings
from relay.dependencies import get_registry, get_settings, verified_interaction_body
from relay.errors import UnsupportedEvent
from relay.logging import get_logger
from relay.models import EventKind
from relay.schemas import Interaction, InteractionResponseType
from relay.services.dispatch import DispatchContext, dispatch
from relay.services.events import parse_interaction
from relay.services.registry import RoutingRuleStore

logger = get_logger(__name__)

router = APIRouter(tags=["discord"])


@router.post("/interactions")
async def interactions(
    body: bytes = Depends(verified_interaction_body),
    registry: RoutingRuleStore = Depends(get_registry),
    cfg: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """
    Interactions endpoint URL where Discord sends HTTP requests.

    The body is parsed only after its signature has been verified against the
    raw bytes. Pings are answered with PONG; application commands are
    dispatched by name and answered inline.
    """
    try:
        interaction = Interaction.model_validate_json(body)
    except ValidationError as exc:
        logger.error("interaction_invalid", error=str(exc))
        raise UnsupportedEvent("invalid interaction payload") from exc

    try:
        event = parse_interaction(interaction)
    except UnsupportedEvent:
        logger.error("unknown_interaction_type", type=interaction.type)
        raise

    outcome = dispatch(event, DispatchContext(registry=registry, public_url=cfg.public_url))
    if outcome.kind is EventKind.PING:
        return {"type": int(InteractionResponseType.PONG)}
    return {
        "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": outcome.reply.to_data() if outcome.reply else {},
    }
