"""Configuration classes and enums for logging."""

from enum import IntEnum

import msgspec

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class LogLevel(IntEnum):
    """Log level enumeration."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class LoggerConfig(msgspec.Struct, kw_only=True):
    """Configuration for the buffered logger.

    Attributes:
        base_level: Lowest level that is logged. Can be changed at runtime
            through `Logger.set_log_level`.
        do_stdout: Also print flushed lines to stdout.
        str_format: %-style format with asctime, levelname, name and
            message fields. Must contain the message field.
        flush_interval_s: Longest time a line waits in the buffer.
        buffer_size: Buffered line count that forces a flush.
    """

    base_level: LogLevel = LogLevel.INFO
    do_stdout: bool = True
    str_format: str = DEFAULT_FORMAT
    flush_interval_s: float = 1.0
    buffer_size: int = 10000

    def __post_init__(self) -> None:
        if self.flush_interval_s <= 0.0:
            raise ValueError(
                f"Invalid flush interval; expected >0 but got {self.flush_interval_s}"
            )
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )

    @classmethod
    def quiet(cls) -> "LoggerConfig":
        """Warnings and errors only, the level used by the default loggers."""
        return cls(base_level=LogLevel.WARNING)
