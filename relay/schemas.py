"""Discord interaction schemas and protocol constants."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class InteractionResponseFlags(IntEnum):
    EPHEMERAL = 1 << 6
    IS_COMPONENTS_V2 = 1 << 15


class MessageComponentTypes(IntEnum):
    TEXT_DISPLAY = 10


class InteractionData(BaseModel):
    """``data`` of an application command interaction."""

    name: str = ""
    options: list[dict[str, Any]] = []

    class Config:
        extra = "allow"


class Interaction(BaseModel):
    """
    Minimal model for a Discord interaction.
    Only fields used by this app are included.
    """

    id: Optional[str] = None
    type: int
    data: Optional[InteractionData] = None
    channel_id: Optional[str] = None

    class Config:
        extra = "allow"
