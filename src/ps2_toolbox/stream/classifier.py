"""Classifies candidate messages into the known response shapes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

import msgspec

from ps2_toolbox.errors import ParseFailure

from .responses import (
    HelpInfo,
    HelpResponse,
    Response,
    SubscriptionInfo,
    TaggedResponseUnion,
)

_HELP_RESPONSE_KEYS = (
    "example event service message payloads",
    "example messages to event service",
)
_HELP_INFO_KEY = "send this for help"
_SUBSCRIPTION_KEY = "subscription"


def _read_only(value: Any) -> Any:
    """Freezes decoded JSON: objects become mapping proxies, arrays tuples."""
    if isinstance(value, dict):
        return MappingProxyType({key: _read_only(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_read_only(item) for item in value)
    return value


class _Discriminator(msgspec.Struct):
    """Reads only the "type" discriminator, skipping every other field."""

    type: str | None = None


class MessageClassifier:
    """
    Turns one candidate message into a typed response.

    The "type" discriminator is read first with a one-field struct. Tagged
    messages are then decoded straight into their variant; untagged ones
    are told apart by which top level keys they carry. Numbers and
    booleans sent as strings are coerced.

    Anything that matches no known shape, including service messages with
    an unknown event name and echo replies, raises ParseFailure.
    """

    def __init__(self) -> None:
        self._type_decoder = msgspec.json.Decoder(_Discriminator)
        self._tagged_decoder = msgspec.json.Decoder(TaggedResponseUnion, strict=False)
        self._object_decoder = msgspec.json.Decoder(dict[str, Any])

    def classify(self, candidate: bytes) -> Response:
        """
        Parameters
        ----------
        candidate : bytes
            A single JSON document.

        Returns
        -------
        Response
            Exactly one of Heartbeat, ServiceMessage, ServiceStateChanged,
            ConnectionStateChanged, SubscriptionInfo, HelpResponse or HelpInfo.

        Raises
        ------
        ParseFailure
            If the candidate is not JSON or matches no known shape.
        """
        try:
            head = self._type_decoder.decode(candidate)
        except msgspec.DecodeError as exc:
            raise ParseFailure(f"Not a JSON object; {exc}") from exc

        if head.type is not None:
            try:
                return self._tagged_decoder.decode(candidate)
            except msgspec.DecodeError as exc:
                raise ParseFailure(f"Invalid '{head.type}' message; {exc}") from exc

        obj = self._object_decoder.decode(candidate)
        try:
            if _SUBSCRIPTION_KEY in obj:
                return msgspec.convert(
                    obj[_SUBSCRIPTION_KEY], SubscriptionInfo, strict=False
                )
            if all(key in obj for key in _HELP_RESPONSE_KEYS):
                return msgspec.convert(obj, HelpResponse)
            if _HELP_INFO_KEY in obj:
                return msgspec.convert(obj, HelpInfo)
        except msgspec.ValidationError as exc:
            raise ParseFailure(f"Invalid untagged message; {exc}") from exc

        raise ParseFailure(f"Unrecognized message with keys {sorted(obj)}")

    def decode_raw(self, candidate: bytes) -> Any:
        """Decodes a candidate into a read-only view of the JSON value.

        Objects are returned as `MappingProxyType` and arrays as tuples, so
        every raw listener sees the value as it arrived.

        Raises:
            ParseFailure: If the candidate is not valid JSON.
        """
        try:
            value = msgspec.json.decode(candidate)
        except msgspec.DecodeError as exc:
            raise ParseFailure(f"Invalid JSON; {exc}") from exc
        return _read_only(value)
