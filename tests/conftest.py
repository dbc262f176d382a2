"""Shared fixtures for the relay test suite."""

from __future__ import annotations

import json
from typing import Any

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from fastapi import FastAPI
from fastapi.testclient import TestClient

from relay.app import create_app
from relay.config import Settings
from relay.dependencies import get_delivery, get_registry, get_settings
from relay.models import OutboundMessage
from relay.services.registry import InMemoryRoutingRuleStore
from relay.utils import gh_signature

TIMESTAMP = "1700000000"


class RecordingDelivery:
    """Delivery double that keeps every submitted message."""

    def __init__(self) -> None:
        self.messages: list[OutboundMessage] = []

    def submit(self, message: OutboundMessage) -> bool:
        self.messages.append(message)
        return True


@pytest.fixture
def signing_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key_hex(signing_key: Ed25519PrivateKey) -> str:
    return signing_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()


@pytest.fixture
def settings(public_key_hex: str) -> Settings:
    return Settings(
        discord_token="bot-token",
        app_id="42",
        public_key=public_key_hex,
        github_webhook_secret="",
        public_url="https://relay.example",
    )


@pytest.fixture
def registry() -> InMemoryRoutingRuleStore:
    return InMemoryRoutingRuleStore()


@pytest.fixture
def delivery() -> RecordingDelivery:
    return RecordingDelivery()


@pytest.fixture
def app(
    settings: Settings,
    registry: InMemoryRoutingRuleStore,
    delivery: RecordingDelivery,
) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_delivery] = lambda: delivery
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def post_interaction(client: TestClient, signing_key: Ed25519PrivateKey):
    """POST a correctly signed interaction body."""

    def _post(payload: dict[str, Any]):
        body = json.dumps(payload).encode()
        signature = signing_key.sign(TIMESTAMP.encode() + body).hex()
        return client.post(
            "/interactions",
            content=body,
            headers={
                "Content-Type": "application/json",
                "X-Signature-Ed25519": signature,
                "X-Signature-Timestamp": TIMESTAMP,
            },
        )

    return _post


@pytest.fixture
def post_github(client: TestClient):
    """POST a GitHub delivery, signed with ``secret`` when one is given."""

    def _post(event: str, payload: Any, *, secret: str | None = None, body: bytes | None = None):
        raw = body if body is not None else json.dumps(payload).encode()
        headers = {"Content-Type": "application/json", "X-GitHub-Event": event}
        if secret:
            headers["X-Hub-Signature-256"] = gh_signature(secret, raw)
        return client.post("/github-webhook", content=raw, headers=headers)

    return _post
