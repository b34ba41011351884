"""In-memory transport and fixtures for driving the streaming session."""

import asyncio

import pytest
import pytest_asyncio

from ps2_toolbox.logging import Logger, LoggerConfig, LogLevel
from ps2_toolbox.stream.config import StreamConfig
from ps2_toolbox.stream.connection import BaseConnection
from ps2_toolbox.stream.session import EventStreamingClient


class FakeConnection(BaseConnection):
    """Feeds scripted frames to the session and records sent messages."""

    def __init__(self, frames: list[bytes] | None = None, close_code: int | None = 1000) -> None:
        self.sent: list[bytes] = []
        self.closed = False
        self.final_close_code = close_code
        self._frames: asyncio.Queue[bytes | None] = asyncio.Queue()
        for frame in frames or []:
            self._frames.put_nowait(frame)

    def feed(self, frame: bytes) -> None:
        self._frames.put_nowait(frame)

    def end(self) -> None:
        """Simulates the server closing the connection."""
        self.close_code = self.final_close_code
        self._frames.put_nowait(None)

    def send(self, msg: bytes) -> None:
        self.sent.append(msg)

    async def recv(self) -> bytes | None:
        return await self._frames.get()

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._frames.put_nowait(None)


class FakeConnector:
    """Connector returning a prepared FakeConnection, or failing."""

    def __init__(self, conn: FakeConnection | None = None, error: Exception | None = None) -> None:
        self.conn = conn
        self.error = error
        self.calls: list[str] = []

    async def __call__(self, url: str, logger: Logger) -> FakeConnection:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.conn


@pytest_asyncio.fixture
async def quiet_logger():
    logger = Logger(
        name="test-stream",
        config=LoggerConfig(base_level=LogLevel.ERROR, do_stdout=False),
    )
    yield logger
    await logger.shutdown()


@pytest.fixture
def stream_config() -> StreamConfig:
    return StreamConfig.default("example")


@pytest.fixture
def make_client(stream_config, quiet_logger):
    """Builds a client wired to a FakeConnection. Returns (client, conn, connector)."""

    def _make(frames: list[bytes] | None = None, registry=None, error=None):
        conn = FakeConnection(frames)
        connector = FakeConnector(conn, error=error)
        client = EventStreamingClient(
            stream_config,
            registry=registry,
            logger=quiet_logger,
            connector=connector,
        )
        return client, conn, connector

    return _make


@pytest.fixture
def make_connector():
    """Builds a FakeConnector around a fresh FakeConnection. Returns (conn, connector)."""

    def _make(frames: list[bytes] | None = None):
        conn = FakeConnection(frames)
        return conn, FakeConnector(conn)

    return _make
