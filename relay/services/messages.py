"""Outbound message construction. Pure: no I/O, no exceptions on missing fields."""

from __future__ import annotations

import random
from typing import Callable, Sequence

from relay.models import OutboundMessage, RepositoryPullRequest, RepositoryPush, RoutingRule
from relay.schemas import InteractionResponseFlags, MessageComponentTypes

EMOJI_POOL: tuple[str, ...] = (
    "😭",
    "😄",
    "😌",
    "🤓",
    "😎",
    "😤",
    "🤖",
    "😶‍🌫️",
    "🌏",
    "📸",
    "💿",
    "👋",
    "🌊",
    "✨",
)

WEBHOOK_PATH = "/github-webhook"
WEBHOOK_URL_PLACEHOLDER = "YOUR_SERVER_URL" + WEBHOOK_PATH

Picker = Callable[[Sequence[str]], str]


def role_mention(role_id: str) -> str:
    return f"<@&{role_id}>"


def random_emoji(pick: Picker = random.choice) -> str:
    return pick(EMOJI_POOL)


def webhook_url(public_url: str | None) -> str:
    if not public_url:
        return WEBHOOK_URL_PLACEHOLDER
    return public_url.rstrip("/") + WEBHOOK_PATH


def build_greeting(channel_id: str = "", pick: Picker = random.choice) -> OutboundMessage:
    return OutboundMessage(
        destination_channel_id=channel_id,
        flags=int(InteractionResponseFlags.IS_COMPONENTS_V2),
        components=[
            {
                "type": int(MessageComponentTypes.TEXT_DISPLAY),
                "content": f"hello world {random_emoji(pick)}",
            }
        ],
    )


def build_setup_confirmation(rule: RoutingRule, public_url: str | None) -> OutboundMessage:
    content = (
        "✅ GitHub notifications configured!\n"
        f"**Repository:** {rule.repository_full_name}\n"
        f"**Push notifications:** {role_mention(rule.push_role_id)}\n"
        f"**PR notifications:** {role_mention(rule.pr_role_id)}\n\n"
        "**Next step:** Set up a webhook in your GitHub repo pointing to:\n"
        f"`{webhook_url(public_url)}`\n"
        "Select events: `Pushes` and `Pull requests`"
    )
    return OutboundMessage(
        destination_channel_id=rule.channel_id,
        content=content,
        flags=int(InteractionResponseFlags.EPHEMERAL),
    )


def build_push_notification(rule: RoutingRule, event: RepositoryPush) -> OutboundMessage:
    content = (
        f"{role_mention(rule.push_role_id)} 🚀 **New Push to {event.repository_full_name}**\n"
        f"**Branch:** {event.branch}\n"
        f"**By:** {event.pusher_name}\n"
        f"**Commits:** {event.commit_count or 0}\n"
        f"**Compare:** {event.compare_url}"
    )
    return OutboundMessage(destination_channel_id=rule.channel_id, content=content)


def build_pull_request_notification(
    rule: RoutingRule, event: RepositoryPullRequest
) -> OutboundMessage:
    content = (
        f"{role_mention(rule.pr_role_id)} 📝 **Pull Request {event.action} on {event.repository_full_name}**\n"
        f"**Title:** {event.title}\n"
        f"**By:** {event.author}\n"
        f"**URL:** {event.url}"
    )
    return OutboundMessage(destination_channel_id=rule.channel_id, content=content)
