"""Event dispatch: one handler per event kind, one per supported command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from relay.errors import MissingRequiredOption, UnsupportedEvent
from relay.logging import get_logger
from relay.models import (
    CommandInvocation,
    EventKind,
    InboundEvent,
    OutboundMessage,
    RepositoryPush,
    RoutingRule,
)
from relay.services.messages import (
    build_greeting,
    build_pull_request_notification,
    build_push_notification,
    build_setup_confirmation,
)
from relay.services.registry import RoutingRuleStore

logger = get_logger(__name__)

SETUP_OPTIONS = ("push_role", "pr_role", "repo")


@dataclass
class DispatchContext:
    registry: RoutingRuleStore
    public_url: str = ""


@dataclass
class Outcome:
    """
    Result of handling one event.

    ``reply`` is the immediate command response; ``notification`` is a message
    to hand to the delivery queue. A ping carries neither.
    """

    kind: EventKind
    reply: Optional[OutboundMessage] = None
    notification: Optional[OutboundMessage] = None


Handler = Callable[[InboundEvent, DispatchContext], Outcome]
CommandHandler = Callable[[CommandInvocation, DispatchContext], OutboundMessage]


def _cmd_test(cmd: CommandInvocation, _ctx: DispatchContext) -> OutboundMessage:
    return build_greeting(cmd.source_channel_id)


def _cmd_github_setup(cmd: CommandInvocation, ctx: DispatchContext) -> OutboundMessage:
    values: dict[str, str] = {}
    for name in SETUP_OPTIONS:
        value = cmd.option(name)
        if value is None or str(value) == "":
            raise MissingRequiredOption(name)
        values[name] = str(value)
    if not cmd.source_channel_id:
        raise UnsupportedEvent("github-setup must be invoked from a channel")

    rule = RoutingRule(
        channel_id=cmd.source_channel_id,
        push_role_id=values["push_role"],
        pr_role_id=values["pr_role"],
        repository_full_name=values["repo"],
    )
    ctx.registry.upsert(rule)
    logger.info(
        "routing_rule_configured",
        channel_id=rule.channel_id,
        repository=rule.repository_full_name,
    )
    return build_setup_confirmation(rule, ctx.public_url)


COMMAND_HANDLERS: dict[str, CommandHandler] = {
    "test": _cmd_test,
    "github-setup": _cmd_github_setup,
}


def _handle_ping(_event: InboundEvent, _ctx: DispatchContext) -> Outcome:
    return Outcome(kind=EventKind.PING)


def _handle_command(event: InboundEvent, ctx: DispatchContext) -> Outcome:
    handler = COMMAND_HANDLERS.get(event.name)
    if handler is None:
        logger.error("unknown_command", name=event.name)
        raise UnsupportedEvent("unknown command")
    return Outcome(kind=event.kind, reply=handler(event, ctx))


def _handle_repository_event(event: InboundEvent, ctx: DispatchContext) -> Outcome:
    rule = ctx.registry.find_by_repository(event.repository_full_name)
    if rule is None:
        logger.info("no_routing_rule", repository=event.repository_full_name, kind=event.kind.value)
        return Outcome(kind=event.kind)
    if isinstance(event, RepositoryPush):
        message = build_push_notification(rule, event)
    else:
        message = build_pull_request_notification(rule, event)
    return Outcome(kind=event.kind, notification=message)


HANDLERS: dict[EventKind, Handler] = {
    EventKind.PING: _handle_ping,
    EventKind.COMMAND_INVOCATION: _handle_command,
    EventKind.REPOSITORY_PUSH: _handle_repository_event,
    EventKind.REPOSITORY_PULL_REQUEST: _handle_repository_event,
}

_unhandled = set(EventKind) - set(HANDLERS)
if _unhandled:
    raise RuntimeError(f"no handler for event kinds: {sorted(k.value for k in _unhandled)}")


def dispatch(event: InboundEvent, ctx: DispatchContext) -> Outcome:
    """Run the handler registered for ``event.kind``."""
    return HANDLERS[event.kind](event, ctx)
