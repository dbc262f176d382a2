"""Channel → routing rule registry."""

from __future__ import annotations

from typing import Optional, Protocol

from relay.models import RoutingRule


class RoutingRuleStore(Protocol):
    """What the event router needs from a rule store."""

    def upsert(self, rule: RoutingRule) -> None: ...

    def find_by_repository(self, full_name: str) -> Optional[RoutingRule]: ...


class InMemoryRoutingRuleStore:
    """
    Process-local rule store.

    Rules live only as long as the process. Lookups by repository return the
    first rule in registration order; replacing a channel's rule keeps that
    channel's original position.
    """

    def __init__(self) -> None:
        self._rules: dict[str, RoutingRule] = {}

    def upsert(self, rule: RoutingRule) -> None:
        for field_name in ("channel_id", "push_role_id", "pr_role_id", "repository_full_name"):
            if not getattr(rule, field_name):
                raise ValueError(f"{field_name} must not be empty")
        self._rules[rule.channel_id] = rule

    def find_by_repository(self, full_name: str) -> Optional[RoutingRule]:
        return next(
            (r for r in self._rules.values() if r.repository_full_name == full_name),
            None,
        )

    def get(self, channel_id: str) -> Optional[RoutingRule]:
        return self._rules.get(channel_id)

    def list_rules(self) -> list[RoutingRule]:
        return list(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
