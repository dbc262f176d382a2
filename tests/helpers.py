"""Payload builders for interaction and webhook tests."""

from __future__ import annotations

from typing import Any

WEBHOOK_SECRET = "s3cr3t"


def setup_command(channel_id: str, **options: str) -> dict[str, Any]:
    return {
        "id": "1",
        "type": 2,
        "channel_id": channel_id,
        "data": {
            "name": "github-setup",
            "options": [{"name": k, "value": v} for k, v in options.items()],
        },
    }


def push_payload(repo: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "ref": "refs/heads/main",
        "repository": {"full_name": repo},
        "pusher": {"name": "ada"},
        "commits": [{}, {}],
        "compare": "http://x/compare",
    }
    payload.update(overrides)
    return payload


def pull_request_payload(repo: str, action: str = "opened") -> dict[str, Any]:
    return {
        "action": action,
        "repository": {"full_name": repo},
        "pull_request": {
            "title": "Add widgets",
            "user": {"login": "grace"},
            "html_url": "https://github.com/acme/widgets/pull/7",
        },
    }
