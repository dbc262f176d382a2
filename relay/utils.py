"""Request signature verification for both inbound sources."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True)
class Enforced:
    """GitHub deliveries must carry a valid HMAC made with ``secret``."""

    secret: str


@dataclass(frozen=True)
class Disabled:
    """No webhook secret configured: every delivery is accepted."""


VerificationPolicy = Union[Enforced, Disabled]


def policy_from_secret(secret: str | None) -> VerificationPolicy:
    return Enforced(secret) if secret else Disabled()


def gh_signature(secret: str, body: bytes) -> str:
    """Return the ``X-Hub-Signature-256`` value GitHub would send for ``body``."""
    mac = hmac.new(secret.encode(), msg=body, digestmod=hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + mac


def gh_verify(secret: str, body: bytes, signature_header: str | None) -> bool:
    """
    Verify GitHub webhook HMAC signature (X-Hub-Signature-256).

    ``body`` must be the raw bytes as received; a re-serialised payload
    does not reliably reproduce what GitHub signed.

    Returns
    -------
    bool
        True if valid, False otherwise.
    """
    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        return False
    return hmac.compare_digest(
        gh_signature(secret, body).encode(),
        signature_header.encode("utf-8", "surrogateescape"),
    )


def gh_check(policy: VerificationPolicy, body: bytes, signature_header: str | None) -> bool:
    """Apply ``policy`` to a delivery. ``Disabled`` short-circuits to True."""
    if isinstance(policy, Disabled):
        return True
    return gh_verify(policy.secret, body, signature_header)


def discord_verify(
    public_key: str,
    body: bytes,
    signature: str | None,
    timestamp: str | None,
) -> bool:
    """
    Verify a Discord interaction (X-Signature-Ed25519 / X-Signature-Timestamp).

    The signed message is ``timestamp + raw body``; ``public_key`` and
    ``signature`` are hex strings.
    """
    if not public_key or not signature or not timestamp:
        return False
    try:
        key = Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key))
        key.verify(bytes.fromhex(signature), timestamp.encode() + body)
    except (ValueError, InvalidSignature):
        return False
    return True
