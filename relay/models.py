"""Routing rules, inbound events and outbound messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


@dataclass
class RoutingRule:
    """Where and whom to ping for one GitHub repository."""

    channel_id: str
    push_role_id: str
    pr_role_id: str
    repository_full_name: str


class EventKind(str, Enum):
    PING = "ping"
    COMMAND_INVOCATION = "command_invocation"
    REPOSITORY_PUSH = "repository_push"
    REPOSITORY_PULL_REQUEST = "repository_pull_request"


@dataclass(frozen=True)
class Ping:
    kind: EventKind = field(default=EventKind.PING, init=False)


@dataclass(frozen=True)
class CommandInvocation:
    name: str
    options: tuple[dict[str, Any], ...] = ()
    source_channel_id: str = ""
    kind: EventKind = field(default=EventKind.COMMAND_INVOCATION, init=False)

    def option(self, name: str) -> Optional[Any]:
        """Value of the option called ``name``, or None when absent."""
        for opt in self.options:
            if opt.get("name") == name:
                return opt.get("value")
        return None


@dataclass(frozen=True)
class RepositoryPush:
    repository_full_name: str
    branch: str
    pusher_name: str
    commit_count: int
    compare_url: str
    kind: EventKind = field(default=EventKind.REPOSITORY_PUSH, init=False)


@dataclass(frozen=True)
class RepositoryPullRequest:
    repository_full_name: str
    action: str
    author: str
    title: str
    url: str
    kind: EventKind = field(default=EventKind.REPOSITORY_PULL_REQUEST, init=False)


InboundEvent = Union[Ping, CommandInvocation, RepositoryPush, RepositoryPullRequest]
RepositoryEvent = Union[RepositoryPush, RepositoryPullRequest]


@dataclass
class OutboundMessage:
    """Message content ready for Discord, either as a reply or a channel post."""

    destination_channel_id: str
    content: str = ""
    flags: int = 0
    components: Optional[list[dict[str, Any]]] = None

    def to_data(self) -> dict[str, Any]:
        """Discord message body (``content``/``flags``/``components``)."""
        data: dict[str, Any] = {}
        if self.content:
            data["content"] = self.content
        if self.flags:
            data["flags"] = int(self.flags)
        if self.components is not None:
            data["components"] = self.components
        return data
