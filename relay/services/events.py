"""Turn verified request bodies into inbound events."""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from relay.errors import UnsupportedEvent
from relay.models import (
    CommandInvocation,
    Ping,
    RepositoryPullRequest,
    RepositoryPush,
)
from relay.schemas import Interaction, InteractionType

BRANCH_REF_PREFIX = "refs/heads/"


def _dig(data: Any, path: Sequence[str]) -> Any:
    current = data
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def _text(data: Any, *path: str) -> str:
    value = _dig(data, path)
    return "" if value is None else str(value)


def branch_from_ref(ref: str | None) -> str:
    """``refs/heads/main`` → ``main``. Other refs are returned unchanged."""
    return (ref or "").removeprefix(BRANCH_REF_PREFIX)


def parse_interaction(interaction: Interaction) -> Union[Ping, CommandInvocation]:
    if interaction.type == InteractionType.PING:
        return Ping()
    if interaction.type == InteractionType.APPLICATION_COMMAND:
        data = interaction.data
        return CommandInvocation(
            name=data.name if data else "",
            options=tuple(data.options) if data else (),
            source_channel_id=interaction.channel_id or "",
        )
    raise UnsupportedEvent("unknown interaction type")


def _parse_push(payload: Mapping[str, Any]) -> RepositoryPush:
    commits = payload.get("commits")
    return RepositoryPush(
        repository_full_name=_text(payload, "repository", "full_name"),
        branch=branch_from_ref(_text(payload, "ref")),
        pusher_name=_text(payload, "pusher", "name"),
        commit_count=len(commits) if isinstance(commits, list) else 0,
        compare_url=_text(payload, "compare"),
    )


def _parse_pull_request(payload: Mapping[str, Any]) -> RepositoryPullRequest:
    return RepositoryPullRequest(
        repository_full_name=_text(payload, "repository", "full_name"),
        action=_text(payload, "action"),
        author=_text(payload, "pull_request", "user", "login"),
        title=_text(payload, "pull_request", "title"),
        url=_text(payload, "pull_request", "html_url"),
    )


def parse_github_event(
    event: str | None, payload: Any
) -> Union[Ping, RepositoryPush, RepositoryPullRequest]:
    """Classify a GitHub delivery by its ``X-GitHub-Event`` header."""
    event_key = (event or "").lower()
    if event_key == "ping":
        return Ping()
    if not isinstance(payload, Mapping):
        raise UnsupportedEvent("payload is not a JSON object")
    if event_key == "push":
        return _parse_push(payload)
    if event_key == "pull_request":
        return _parse_pull_request(payload)
    raise UnsupportedEvent(f"unsupported github event: {event_key or '-'}")
