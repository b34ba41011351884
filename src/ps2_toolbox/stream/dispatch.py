"""Listener registry for the three dispatch tiers of a streaming session.

Listeners are either `Listener` subclasses, which keep their own state
between calls, or plain callables taking a single argument.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .events import Event
from .responses import Response

T = TypeVar("T")


class Listener(ABC, Generic[T]):
    """A stateful handler invoked once per dispatched value."""

    @abstractmethod
    def handle(self, value: T) -> None:
        pass


class CallbackListener(Listener[T]):
    """Adapts a single-argument callable to the Listener interface."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[T], Any]) -> None:
        if not callable(callback):
            raise TypeError(
                f"Invalid listener; expected a callable but got {type(callback)}"
            )

        # Verify the signature, must accept exactly one positional arg.
        try:
            sig = inspect.signature(callback)
        except (TypeError, ValueError):
            sig = None
        if sig is not None:
            try:
                sig.bind(None)
            except TypeError as exc:
                raise ValueError(
                    f"Invalid listener signature; expected a single argument "
                    f"but got {sig}"
                ) from exc

        self._callback = callback

    @property
    def callback(self) -> Callable[[T], Any]:
        return self._callback

    def handle(self, value: T) -> None:
        self._callback(value)

    def __repr__(self) -> str:
        return f"CallbackListener({self._callback!r})"


def as_listener(listener: Listener[T] | Callable[[T], Any]) -> Listener[T]:
    """Returns the listener unchanged, or wraps a plain callable."""
    if isinstance(listener, Listener):
        return listener
    return CallbackListener(listener)


class DispatchRegistry:
    """Three append-only, ordered lists of listeners.

    - raw: every candidate that is valid JSON, as a read-only view.
    - classified: every candidate that classifies to a known response.
    - event: the payload of every classified ServiceMessage.

    Dispatch calls each listener of a tier synchronously in registration
    order. Listener exceptions are not caught and propagate to the caller
    of dispatch, which ends the session run loop.
    """

    def __init__(self) -> None:
        self._raw: list[Listener[Any]] = []
        self._classified: list[Listener[Response]] = []
        self._event: list[Listener[Event]] = []

    @property
    def has_raw_listeners(self) -> bool:
        return bool(self._raw)

    @property
    def has_classified_listeners(self) -> bool:
        return bool(self._classified)

    @property
    def has_event_listeners(self) -> bool:
        return bool(self._event)

    def register_raw(self, listener: Listener[Any] | Callable[[Any], Any]) -> Listener[Any]:
        """Registers a listener for raw decoded JSON and returns it."""
        wrapped = as_listener(listener)
        self._raw.append(wrapped)
        return wrapped

    def register_classified(
        self, listener: Listener[Response] | Callable[[Response], Any]
    ) -> Listener[Response]:
        """Registers a listener for classified responses and returns it."""
        wrapped = as_listener(listener)
        self._classified.append(wrapped)
        return wrapped

    def register_event(
        self, listener: Listener[Event] | Callable[[Event], Any]
    ) -> Listener[Event]:
        """Registers a listener for event payloads and returns it."""
        wrapped = as_listener(listener)
        self._event.append(wrapped)
        return wrapped

    def dispatch_raw(self, value: Any) -> None:
        for listener in self._raw:
            listener.handle(value)

    def dispatch_classified(self, response: Response) -> None:
        for listener in self._classified:
            listener.handle(response)

    def dispatch_event(self, payload: Event) -> None:
        for listener in self._event:
            listener.handle(payload)

    def __len__(self) -> int:
        return len(self._raw) + len(self._classified) + len(self._event)
