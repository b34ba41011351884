"""Streaming session: connection ownership, the run loop and dispatch."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import IntEnum
from typing import Self

import msgspec

from ps2_toolbox.errors import (
    NotConnectedError,
    ParseFailure,
    SessionConsumedError,
    StreamConnectionError,
)
from ps2_toolbox.logging import Logger, get_default_logger
from ps2_toolbox.time import time_ms

from .classifier import MessageClassifier
from .config import StreamConfig
from .connection import BaseConnection, EventConnection
from .dispatch import DispatchRegistry
from .framing import FrameSplitter
from .request import SubscriptionRequest
from .responses import ServiceMessage

Connector = Callable[[str, Logger], Awaitable[BaseConnection]]


class SessionState(IntEnum):
    DISCONNECTED = 0
    CONNECTED = 1
    RUNNING = 2
    TERMINATED = 3


class SessionStats(msgspec.Struct):
    """Counters kept by the run loop.

    Attributes:
        frames_received: Raw frames read from the connection.
        candidates_seen: Candidate messages produced by the splitter.
        candidates_discarded: Candidates that failed classification.
        last_frame_time_ms: Wall clock time of the last frame, 0 if none.
    """

    frames_received: int = 0
    candidates_seen: int = 0
    candidates_discarded: int = 0
    last_frame_time_ms: int = 0


class EventStreamingClient:
    """A single use session with the event streaming service.

    Typical use is to register listeners, connect, send one or more
    subscription requests and then await `run()`, which returns once the
    connection closes. Listeners run synchronously on the task awaiting
    `run()`; an exception raised by a listener ends the run loop and
    propagates out of `run()`.

    There is no reconnect. Once terminated, create a new client.
    """

    def __init__(
        self,
        config: StreamConfig,
        registry: DispatchRegistry | None = None,
        logger: Logger | None = None,
        connector: Connector | None = None,
    ) -> None:
        """Initializes the session.

        Args:
            config (StreamConfig): Endpoint environment and service id.
            registry (DispatchRegistry, optional): Listener registry, a new
                empty one is created if omitted.
            logger (Logger, optional): Logger for session activity. Defaults
                to the shared "ps2-stream" logger printing warnings and
                errors to stdout.
            connector (Connector, optional): Coroutine function opening the
                transport for a url. Defaults to `EventConnection.open`.
        """
        self._config = config
        self._registry = registry if registry is not None else DispatchRegistry()
        self._logger = logger
        if self._logger is None:
            self._logger = get_default_logger("ps2-stream")
        self._connector = connector if connector is not None else EventConnection.open

        self._classifier = MessageClassifier()
        self._conn: BaseConnection | None = None
        self._state = SessionState.DISCONNECTED
        self._stats = SessionStats()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def registry(self) -> DispatchRegistry:
        return self._registry

    @property
    def stats(self) -> SessionStats:
        return self._stats

    @property
    def is_connected(self) -> bool:
        return self._state in (SessionState.CONNECTED, SessionState.RUNNING)

    def get_config(self) -> StreamConfig:
        return self._config

    async def connect(self) -> None:
        """Opens the connection. Does nothing if already connected.

        Raises:
            StreamConnectionError: If the handshake fails.
            SessionConsumedError: If the session already terminated.
        """
        if self.is_connected:
            return
        if self._state == SessionState.TERMINATED:
            raise SessionConsumedError("Session terminated; create a new client")

        url = self._config.url
        self._logger.info(f"Connecting to event stream on '{url}'.")
        try:
            self._conn = await self._connector(url, self._logger)
        except StreamConnectionError:
            self._logger.error(f"Failed to connect to '{url}'.")
            raise
        except Exception as exc:
            self._logger.error(f"Failed to connect to '{url}'; {exc}")
            raise StreamConnectionError(f"Failed to connect to '{url}'; {exc}") from exc

        self._state = SessionState.CONNECTED
        self._logger.info("Connected to event stream.")

    def send_request(self, request: SubscriptionRequest) -> None:
        """Serializes and sends a request.

        Raises:
            NotConnectedError: If the session is not connected or has terminated.
        """
        if not self.is_connected or self._conn is None:
            raise NotConnectedError(
                f"Cannot send request in state {self._state.name}"
            )

        payload = request.encode()
        self._logger.debug(f"Sending request: {payload.decode()}")
        self._conn.send(payload)

    def _process_frame(self, frame: bytes) -> None:
        """Splits, classifies and dispatches every candidate of one frame."""
        registry = self._registry
        stats = self._stats

        for candidate in FrameSplitter(frame):
            stats.candidates_seen += 1

            if registry.has_raw_listeners:
                try:
                    raw = self._classifier.decode_raw(candidate)
                except ParseFailure:
                    pass
                else:
                    registry.dispatch_raw(raw)

            try:
                response = self._classifier.classify(candidate)
            except ParseFailure as exc:
                stats.candidates_discarded += 1
                self._logger.trace(f"Discarded candidate; {exc}")
                continue

            registry.dispatch_classified(response)
            if isinstance(response, ServiceMessage):
                registry.dispatch_event(response.payload)

    async def run(self) -> int | None:
        """Reads and dispatches frames until the connection closes.

        Returns:
            int | None: Close code sent by the server, None if the
                connection was lost or closed locally without one.

        Raises:
            NotConnectedError: If called before `connect()`.
            SessionConsumedError: If the session already ran.
        """
        if self._state in (SessionState.RUNNING, SessionState.TERMINATED):
            raise SessionConsumedError("run() can only be called once per session")
        if self._state != SessionState.CONNECTED or self._conn is None:
            raise NotConnectedError("Cannot run before connect()")

        self._state = SessionState.RUNNING
        conn = self._conn
        try:
            while True:
                frame = await conn.recv()
                if frame is None:
                    break
                self._stats.frames_received += 1
                self._stats.last_frame_time_ms = int(time_ms())
                self._process_frame(frame)
        finally:
            self._state = SessionState.TERMINATED
            conn.close()
            self._logger.info(
                f"Event stream terminated; close code {conn.close_code}."
            )

        return conn.close_code

    def disconnect(self) -> None:
        """Closes the connection, which also ends a pending `run()`.

        A session that never ran returns to DISCONNECTED and may connect
        again; a running one moves to TERMINATED once `run()` returns.
        """
        if self._conn is None:
            return

        self._logger.info("Disconnecting from event stream.")
        self._conn.close()
        if self._state == SessionState.CONNECTED:
            self._conn = None
            self._state = SessionState.DISCONNECTED

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()
