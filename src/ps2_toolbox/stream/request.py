"""Requests sent to the streaming service after connecting."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

import msgspec

from .events import EventType
from .responses import Service

_encoder = msgspec.json.Encoder()


class Action(StrEnum):
    ECHO = "echo"
    SUBSCRIBE = "subscribe"
    CLEAR_SUBSCRIBE = "clearSubscribe"
    HELP = "help"
    RECENT_CHARACTER_IDS = "recentCharacterIds"
    RECENT_CHARACTER_IDS_COUNT = "recentCharacterIdsCount"


class SubscriptionRequest(msgspec.Struct, frozen=True, omit_defaults=True, rename="camel"):
    """An immutable request to the streaming service.

    Unset optional fields are omitted from the wire form. Worlds encode as
    numbers, character ids as strings.

    Attributes:
        service: Target service, always "event" for gameplay events.
        action: What the request asks the service to do.
        all: Clear every subscription (clearSubscribe only).
        list_characters: Echo back the subscribed character ids.
        payload: Arbitrary JSON echoed back (echo only).
        characters: Character ids to filter on.
        worlds: World ids to filter on.
        event_names: Event names to subscribe to.
    """

    service: Service
    action: Action
    all: bool | None = None
    list_characters: bool | None = None
    payload: Any = None
    characters: tuple[str, ...] | None = None
    worlds: tuple[int, ...] | None = None
    event_names: tuple[EventType, ...] | None = None

    def encode(self) -> bytes:
        """Serializes the request to its JSON wire form."""
        return _encoder.encode(self)

    @classmethod
    def subscribe(
        cls,
        characters: Iterable[int | str] | None = None,
        worlds: Iterable[int] | None = None,
        event_names: Iterable[EventType | str] | None = None,
        list_characters: bool | None = None,
    ) -> SubscriptionRequest:
        """Builds a subscribe request.

        Args:
            characters: Character ids (or "all") to receive character events for.
            worlds: Worlds (or world ids) to receive events for.
            event_names: Event names; plain strings are validated against EventType.
            list_characters: Ask the service to list subscribed characters.

        Raises:
            ValueError: If an event name is unknown.
        """
        return cls(
            service=Service.EVENT,
            action=Action.SUBSCRIBE,
            list_characters=list_characters,
            **_filters(characters, worlds, event_names),
        )

    @classmethod
    def clear_subscribe(
        cls,
        clear_all: bool = False,
        characters: Iterable[int | str] | None = None,
        worlds: Iterable[int] | None = None,
        event_names: Iterable[EventType | str] | None = None,
    ) -> SubscriptionRequest:
        """Builds a clearSubscribe request, either for everything or for
        the given filters.
        """
        return cls(
            service=Service.EVENT,
            action=Action.CLEAR_SUBSCRIBE,
            all=True if clear_all else None,
            **_filters(characters, worlds, event_names),
        )

    @classmethod
    def echo(cls, payload: Any) -> SubscriptionRequest:
        return cls(service=Service.EVENT, action=Action.ECHO, payload=payload)

    @classmethod
    def help(cls) -> SubscriptionRequest:
        return cls(service=Service.EVENT, action=Action.HELP)

    @classmethod
    def recent_character_ids(cls) -> SubscriptionRequest:
        return cls(service=Service.EVENT, action=Action.RECENT_CHARACTER_IDS)

    @classmethod
    def recent_character_ids_count(cls) -> SubscriptionRequest:
        return cls(service=Service.EVENT, action=Action.RECENT_CHARACTER_IDS_COUNT)


def _filters(
    characters: Iterable[int | str] | None,
    worlds: Iterable[int] | None,
    event_names: Iterable[EventType | str] | None,
) -> dict[str, Any]:
    return {
        "characters": None if characters is None else tuple(str(c) for c in characters),
        "worlds": None if worlds is None else tuple(int(w) for w in worlds),
        "event_names": (
            None if event_names is None else tuple(EventType(e) for e in event_names)
        ),
    }
