"""FastAPI dependencies: shared state and raw-body signature checks."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from relay.config import Settings, settings
from relay.errors import AuthenticationFailure
from relay.logging import get_logger
from relay.services.delivery import Delivery
from relay.services.registry import InMemoryRoutingRuleStore, RoutingRuleStore
from relay.utils import discord_verify, gh_check, policy_from_secret

logger = get_logger(__name__)

_registry = InMemoryRoutingRuleStore()


def get_settings() -> Settings:
    return settings


def get_registry() -> RoutingRuleStore:
    return _registry


def get_delivery(request: Request) -> Delivery:
    return request.app.state.delivery


async def verified_interaction_body(
    request: Request,
    x_signature_ed25519: Optional[str] = Header(None),
    x_signature_timestamp: Optional[str] = Header(None),
    cfg: Settings = Depends(get_settings),
) -> bytes:
    """Raw interaction body, returned only once its Ed25519 signature checks out."""
    body = await request.body()
    if not discord_verify(cfg.public_key, body, x_signature_ed25519, x_signature_timestamp):
        logger.warning("interaction_signature_rejected")
        raise AuthenticationFailure("Bad request signature")
    return body


async def verified_github_body(
    request: Request,
    x_hub_signature_256: Optional[str] = Header(None),
    cfg: Settings = Depends(get_settings),
) -> bytes:
    """Raw webhook body, checked against GITHUB_WEBHOOK_SECRET when one is set."""
    body = await request.body()
    if not gh_check(policy_from_secret(cfg.github_webhook_secret), body, x_hub_signature_256):
        logger.warning("github_signature_rejected")
        raise AuthenticationFailure("Invalid signature")
    return body
