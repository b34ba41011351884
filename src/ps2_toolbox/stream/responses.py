"""Wire-format models for every message the streaming service sends.

Three families exist on the wire:
- internally tagged by a "type" field (heartbeat, serviceMessage,
  serviceStateChanged, connectionStateChanged),
- externally tagged by a single wrapping key ("subscription"),
- untagged help texts, told apart only by which keys are present.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import msgspec

from .events import Event


class Service(StrEnum):
    EVENT = "event"
    PUSH = "push"


class TaggedResponse(msgspec.Struct, frozen=True, tag_field="type"):
    """Base class for responses carrying a "type" discriminator."""

    service: Service


class Heartbeat(TaggedResponse, tag="heartbeat"):
    """Periodic keep-alive.

    Attributes:
        online: Either a flag or a mapping of endpoint name to online flag,
            depending on the service version.
    """

    online: Any = None


class ServiceMessage(TaggedResponse, tag="serviceMessage"):
    """A subscribed event."""

    payload: Event


class ServiceStateChanged(TaggedResponse, tag="serviceStateChanged"):
    online: bool
    detail: str = ""


class ConnectionStateChanged(TaggedResponse, tag="connectionStateChanged"):
    connected: bool


class SubscriptionInfo(msgspec.Struct, frozen=True, rename="camel"):
    """Acknowledgement of the active subscription, sent after
    subscribe/clearSubscribe as {"subscription": {...}}.
    """

    event_names: list[str]
    logical_and_characters_with_worlds: bool
    worlds: list[int]
    character_count: int | None = None
    characters: list[str] | None = None


class HelpText(msgspec.Struct, frozen=True):
    """Base class for the untagged help responses."""


class HelpResponse(HelpText):
    """Reply to a help request, listing example payloads and requests."""

    payload_examples: Any = msgspec.field(
        name="example event service message payloads"
    )
    request_examples: Any = msgspec.field(name="example messages to event service")


class HelpInfo(HelpText):
    """Unsolicited hint telling the client how to ask for help."""

    help_payload: Any = msgspec.field(name="send this for help")


Response = (
    Heartbeat
    | ServiceMessage
    | ServiceStateChanged
    | ConnectionStateChanged
    | SubscriptionInfo
    | HelpResponse
    | HelpInfo
)

TaggedResponseUnion = (
    Heartbeat | ServiceMessage | ServiceStateChanged | ConnectionStateChanged
)
