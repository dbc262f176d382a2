"""Discord REST client used for outbound messages and command registration."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

import httpx

from relay.errors import DeliveryError
from relay.models import OutboundMessage

DISCORD_API_BASE = "https://discord.com/api/v10"
HTTP_TIMEOUT_SECONDS = 15
USER_AGENT = "DiscordBot (https://github.com/discord/discord-example-app, 1.0.0)"

Sender = Callable[[OutboundMessage], Awaitable[Any]]


async def discord_request(
    token: str,
    endpoint: str,
    *,
    method: str = "GET",
    body: Any = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Call ``{DISCORD_API_BASE}/{endpoint}`` with bot authorization."""
    url = f"{DISCORD_API_BASE}/{endpoint.lstrip('/')}"
    headers = {
        "Authorization": f"Bot {token}",
        "Content-Type": "application/json; charset=UTF-8",
        "User-Agent": USER_AGENT,
    }
    try:
        async with httpx.AsyncClient(
            timeout=HTTP_TIMEOUT_SECONDS, transport=transport
        ) as client:
            resp = await client.request(method, url, json=body, headers=headers)
    except httpx.HTTPError as exc:
        raise DeliveryError(f"Discord request failed: {exc}") from exc
    if resp.status_code >= 300:
        raise DeliveryError(f"Discord error: {resp.status_code} {resp.text}")
    return resp.json() if resp.content else None


async def send_message(
    token: str,
    channel_id: str,
    content: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Post ``content`` to a channel."""
    return await discord_request(
        token,
        f"channels/{channel_id}/messages",
        method="POST",
        body={"content": content},
        transport=transport,
    )


async def install_global_commands(
    token: str,
    app_id: str,
    commands: list[dict[str, Any]],
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Bulk-overwrite the application's global commands."""
    return await discord_request(
        token,
        f"applications/{app_id}/commands",
        method="PUT",
        body=commands,
        transport=transport,
    )


def discord_sender(
    token: str, *, transport: Optional[httpx.AsyncBaseTransport] = None
) -> Sender:
    """Bind ``send_message`` to a bot token for the delivery queue."""

    async def _send(message: OutboundMessage) -> Any:
        return await send_message(
            token,
            message.destination_channel_id,
            message.content,
            transport=transport,
        )

    return _send
