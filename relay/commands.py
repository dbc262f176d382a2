"""Slash command schemas and the one-shot registration script.

Run ``python -m relay.commands`` once (or after changing a schema) to
publish the commands for APP_ID.
"""

from __future__ import annotations

import asyncio
from typing import Any

from relay.config import settings
from relay.logging import get_logger, setup_logging
from relay.services.discord import install_global_commands

logger = get_logger(__name__)

CHAT_INPUT = 1
OPTION_STRING = 3
OPTION_ROLE = 8

TEST_COMMAND: dict[str, Any] = {
    "name": "test",
    "description": "Basic command",
    "type": CHAT_INPUT,
    "integration_types": [0, 1],
    "contexts": [0, 1, 2],
}

GITHUB_SETUP_COMMAND: dict[str, Any] = {
    "name": "github-setup",
    "description": "Configure GitHub notifications for this channel",
    "options": [
        {
            "type": OPTION_ROLE,
            "name": "push_role",
            "description": "Role to ping for push events",
            "required": True,
        },
        {
            "type": OPTION_ROLE,
            "name": "pr_role",
            "description": "Role to ping for pull request events",
            "required": True,
        },
        {
            "type": OPTION_STRING,
            "name": "repo",
            "description": "Repository name (e.g., owner/repo)",
            "required": True,
        },
    ],
    "type": CHAT_INPUT,
    "integration_types": [0],
    "contexts": [0],
}

ALL_COMMANDS: list[dict[str, Any]] = [TEST_COMMAND, GITHUB_SETUP_COMMAND]


async def install_commands() -> Any:
    if not settings.app_id or not settings.discord_token:
        raise SystemExit("APP_ID and DISCORD_TOKEN must be set")
    result = await install_global_commands(settings.discord_token, settings.app_id, ALL_COMMANDS)
    logger.info("commands_installed", app_id=settings.app_id, count=len(ALL_COMMANDS))
    return result


def main() -> None:
    setup_logging(settings.log_level, settings.log_format)
    asyncio.run(install_commands())


if __name__ == "__main__":
    main()
