"""Tests for the picows frame listener and connection wrapper."""

import asyncio
from types import SimpleNamespace

import pytest
from picows import WSCloseCode, WSMsgType

from ps2_toolbox.errors import StreamConnectionError
from ps2_toolbox.stream.connection import EventConnection, _FrameListener


class StubTransport:
    def __init__(self) -> None:
        self.sent: list[tuple] = []
        self.close_sent: list = []
        self.disconnected = False

    def send(self, msg_type, msg) -> None:
        self.sent.append((msg_type, msg))

    def send_close(self, code) -> None:
        self.close_sent.append(code)

    def disconnect(self) -> None:
        self.disconnected = True


def frame(msg_type, payload: bytes = b"", fin: bool = True, close_code=None):
    return SimpleNamespace(
        msg_type=msg_type,
        fin=fin,
        get_payload_as_memoryview=lambda: memoryview(payload),
        get_close_code=lambda: close_code,
    )


@pytest.fixture
def listener() -> _FrameListener:
    return _FrameListener(asyncio.Queue())


class TestFrameListener:
    def test_text_frame_queued(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        listener.on_ws_frame(transport, frame(WSMsgType.TEXT, b'{"a":1}'))
        assert listener.messages.get_nowait() == b'{"a":1}'

    def test_fragments_joined(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        listener.on_ws_frame(transport, frame(WSMsgType.TEXT, b'{"a"', fin=False))
        listener.on_ws_frame(transport, frame(WSMsgType.CONTINUATION, b":1", fin=False))
        listener.on_ws_frame(transport, frame(WSMsgType.CONTINUATION, b"}"))
        assert listener.messages.get_nowait() == b'{"a":1}'
        assert listener.messages.empty()

    def test_control_frames_between_fragments(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        listener.on_ws_frame(transport, frame(WSMsgType.TEXT, b'{"a":', fin=False))
        listener.on_ws_frame(transport, frame(WSMsgType.PONG, b"hb"))
        listener.on_ws_frame(transport, frame(WSMsgType.PING, b"hb"))
        listener.on_ws_frame(transport, frame(WSMsgType.CONTINUATION, b"1}"))
        assert listener.messages.get_nowait() == b'{"a":1}'
        assert listener.messages.empty()

    def test_binary_ignored(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        listener.on_ws_frame(transport, frame(WSMsgType.BINARY, b"\x00", fin=False))
        listener.on_ws_frame(transport, frame(WSMsgType.CONTINUATION, b"\x01"))
        assert listener.messages.empty()

    def test_close_frame_echoed(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        listener.on_ws_frame(
            transport, frame(WSMsgType.CLOSE, close_code=WSCloseCode.GOING_AWAY)
        )
        assert transport.close_sent == [WSCloseCode.GOING_AWAY]
        assert transport.disconnected
        assert listener.close_code == 1001

    def test_disconnect_pushes_sentinel(self, listener: _FrameListener) -> None:
        listener.on_ws_disconnected(StubTransport())
        assert listener.messages.get_nowait() is None


class TestEventConnection:
    @pytest.mark.asyncio
    async def test_close_wakes_recv(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        conn = EventConnection(transport, listener, logger=SimpleNamespace(debug=print))
        recv_task = asyncio.create_task(conn.recv())
        await asyncio.sleep(0)

        conn.close()
        conn.close()

        assert await asyncio.wait_for(recv_task, timeout=1.0) is None
        assert transport.close_sent == [WSCloseCode.OK]
        assert await conn.recv() is None

    @pytest.mark.asyncio
    async def test_send_text(self, listener: _FrameListener) -> None:
        transport = StubTransport()
        conn = EventConnection(transport, listener, logger=SimpleNamespace(debug=print))
        conn.send(b'{"action":"help"}')
        assert transport.sent == [(WSMsgType.TEXT, b'{"action":"help"}')]

    @pytest.mark.asyncio
    async def test_open_failure_raises(self) -> None:
        with pytest.raises(StreamConnectionError):
            await EventConnection.open("ws://127.0.0.1:1/", logger=None)
