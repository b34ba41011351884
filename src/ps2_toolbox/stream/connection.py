"""Transport for the event stream.

`BaseConnection` is the seam the streaming session reads from; the
picows backed `EventConnection` is the production implementation.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod

from picows import WSCloseCode, WSFrame, WSListener, WSMsgType, WSTransport, ws_connect

from ps2_toolbox.errors import NotConnectedError, StreamConnectionError
from ps2_toolbox.logging import Logger


class BaseConnection(ABC):
    """A connected, message oriented transport.

    Attributes:
        close_code: Close code received from the peer, None until the
            connection closed or when it was lost without a close frame.
    """

    close_code: int | None = None

    @abstractmethod
    def send(self, msg: bytes) -> None:
        """Sends one text message."""

    @abstractmethod
    async def recv(self) -> bytes | None:
        """Waits for the next complete message, None once the connection closed."""

    @abstractmethod
    def close(self) -> None:
        """Closes the connection, waking any pending recv()."""


class _FrameListener(WSListener):
    """
    Collects frames into complete text messages for PicoWs.

    Roughly following https://github.com/tarasko/picows/blob/master/examples/echo_client_cython.pyx.

    Attributes
    ----------
    transport : WSTransport
        Link to underlying API for sending messages.

    messages : asyncio.Queue
        Complete messages, followed by a None sentinel on disconnect.
    """

    def __init__(self, messages: asyncio.Queue) -> None:
        super().__init__()
        self.transport: WSTransport | None = None
        self.messages = messages
        self.close_code: int | None = None
        self.disconnected = False

        self._partial = bytearray()
        self._in_text = False

    def on_ws_connected(self, transport: WSTransport) -> None:
        self.transport = transport

    def on_ws_frame(self, transport: WSTransport, frame: WSFrame) -> None:
        msg_type = frame.msg_type

        if msg_type == WSMsgType.CLOSE:
            self.close_code = int(frame.get_close_code())
            transport.send_close(frame.get_close_code())
            transport.disconnect()
            return

        # Control frames may arrive between the fragments of a message.
        if msg_type in (WSMsgType.PING, WSMsgType.PONG):
            return

        if msg_type == WSMsgType.TEXT:
            self._in_text = True
            self._partial.clear()
        elif msg_type != WSMsgType.CONTINUATION or not self._in_text:
            # Binary messages and their continuations are not part of the feed.
            self._in_text = False
            return

        self._partial += frame.get_payload_as_memoryview()

        if frame.fin:
            self.messages.put_nowait(bytes(self._partial))
            self._partial.clear()
            self._in_text = False

    def on_ws_disconnected(self, transport: WSTransport) -> None:
        self.disconnected = True
        self.messages.put_nowait(None)


class EventConnection(BaseConnection):
    """WebSocket connection to the streaming service."""

    def __init__(
        self, transport: WSTransport, listener: _FrameListener, logger: Logger
    ) -> None:
        self._transport = transport
        self._listener = listener
        self._logger = logger
        self._closed = False

    @classmethod
    async def open(cls, url: str, logger: Logger) -> EventConnection:
        """
        Opens a WebSocket connection to `url`.

        Parameters
        ----------
        url : str
            Full streaming endpoint, including the service id.

        logger : Logger
            Logger instance for connection activity.

        Raises
        ------
        StreamConnectionError
            If the handshake or the underlying transport fails.
        """
        messages: asyncio.Queue[bytes | None] = asyncio.Queue()
        try:
            (transport, listener) = await ws_connect(
                lambda: _FrameListener(messages), url
            )
        except Exception as exc:
            raise StreamConnectionError(f"Failed to connect to '{url}'; {exc}") from exc

        return cls(transport, listener, logger)

    @property
    def close_code(self) -> int | None:
        return self._listener.close_code

    def send(self, msg: bytes) -> None:
        if self._closed:
            raise NotConnectedError("Connection already closed")
        self._transport.send(WSMsgType.TEXT, msg)

    async def recv(self) -> bytes | None:
        if self._closed and self._listener.messages.empty():
            return None
        return await self._listener.messages.get()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        self._logger.debug("Closing event stream connection.")
        if not self._listener.disconnected:
            try:
                self._transport.send_close(WSCloseCode.OK)
            finally:
                self._transport.disconnect()
        # Wakes a pending recv() even if the disconnect callback never fires.
        self._listener.messages.put_nowait(None)
