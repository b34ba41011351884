"""Exception types raised by the streaming session and the census client."""


class Ps2Error(Exception):
    """Base class for all errors raised by ps2_toolbox."""


class StreamConnectionError(Ps2Error, ConnectionError):
    """Raised when the event stream handshake or transport fails."""


class NotConnectedError(Ps2Error):
    """Raised when the session is used without a live connection."""


class SessionConsumedError(Ps2Error):
    """Raised when run() is called on a session that has already run."""


class ParseFailure(Ps2Error):
    """Raised when a candidate message matches none of the known shapes.

    Never fatal; the streaming session discards the candidate and moves on.
    """


class CensusLookupError(Ps2Error, LookupError):
    """Raised when a census lookup cannot be resolved.

    Covers network failures, malformed responses, missing fields and
    empty result lists. Failed lookups are never cached.
    """

    def __init__(self, kind: str, key: object, detail: str) -> None:
        super().__init__(f"{kind} lookup for {key!r} failed: {detail}")
        self.kind = kind
        self.key = key
        self.detail = detail


class CensusNotFoundError(CensusLookupError):
    """Raised when the census returns an empty result list."""
