from datetime import datetime, timezone
from time import (
    time as time_sec,
)
from time import (
    time_ns as time_nano,
)


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def time_ms() -> float:
    """
    Get the current time in milliseconds since the epoch.

    Returns
    -------
    float
        The current time in milliseconds.
    """
    return time_sec() * 1_000.0


def time_ns() -> int:
    """
    Get the current time in nanoseconds since the epoch.

    Returns
    -------
    int
        The current time in nanoseconds.
    """
    return time_nano()


def time_iso8601() -> str:
    """
    Get the current UTC time as an ISO 8601 string with millisecond precision.

    Returns
    -------
    str
        The current time, e.g. "2023-04-04T00:28:50.516Z".
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
