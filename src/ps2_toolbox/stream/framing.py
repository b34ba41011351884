"""Splits one raw read from the event stream into candidate JSON documents.

The service may pack several JSON objects back to back into a single
message with no separator. A boundary is a closing brace that is either
followed by an opening brace or is the last byte of the buffer.

Known limitation: string contents are not tracked, so a value containing
"}{" is split in two. Both halves then fail classification and are
dropped.
"""

from __future__ import annotations

from collections.abc import Iterator

_CLOSE = ord("}")
_OPEN = ord("{")


class FrameSplitter:
    """Lazy, restartable sequence of candidate messages in a buffer.

    Every call to `iter()` scans the buffer from the start again, so the
    same splitter can be iterated any number of times. Slices are yielded
    in the order they appear. A buffer with no boundary yields nothing.

    Parameters
    ----------
    buffer : bytes
        One raw frame as read from the connection.
    """

    __slots__ = ("_buffer",)

    def __init__(self, buffer: bytes) -> None:
        self._buffer = bytes(buffer)

    @property
    def buffer(self) -> bytes:
        return self._buffer

    def __iter__(self) -> Iterator[bytes]:
        buf = self._buffer
        end = len(buf)
        last = 0
        i = buf.find(b"}")
        while i != -1:
            nxt = i + 1
            if nxt == end or buf[nxt] == _OPEN:
                yield buf[last:nxt]
                last = nxt
            i = buf.find(b"}", nxt)

    def __repr__(self) -> str:
        return f"FrameSplitter(len={len(self._buffer)})"


def split_frames(buffer: bytes) -> list[bytes]:
    """
    Eagerly splits a buffer into candidate messages.

    Parameters
    ----------
    buffer : bytes
        One raw frame.

    Returns
    -------
    list[bytes]
        Candidate messages in original order, possibly empty.
    """
    return list(FrameSplitter(buffer))
