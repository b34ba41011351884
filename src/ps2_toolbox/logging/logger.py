"""Buffered logger with a dedicated flushing thread."""

import asyncio
import queue
import sys
import threading
import traceback

from ps2_toolbox.logging.config import LoggerConfig, LogLevel
from ps2_toolbox.logging.handlers import BaseLogHandler
from ps2_toolbox.time.time import time_iso8601, time_s


class Logger:
    """A simple asynchronous logger that buffers messages and pushes them to
    configured handlers at an appropriate time or based on buffer fullness.

    Log calls never block on I/O: formatted lines are queued and a worker
    thread, running its own event loop, batches them to the handlers. This
    keeps the stream run loop free of handler latency.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stdout, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler type; expected BaseLogHandler but got {type(handler)}"
                )

            # Forwards str_format and levels to handlers that format on their own.
            handler.add_primary_config(self._config)

        self._msg_queue: queue.SimpleQueue[str | None] = queue.SimpleQueue()
        self._is_running = True

        self._worker = threading.Thread(
            target=self._run_worker,
            name=f"ps2-logger-{name or 'root'}",
            daemon=True,
        )
        self._worker.start()

    def _run_worker(self) -> None:
        """Entry point of the flushing thread."""
        asyncio.run(self._log_ingestor())

    async def _flush_buffer(self, buffer: list[str]) -> None:
        """Flushes the log message buffer to stdout and all handlers.

        Handlers are pushed concurrently; one failing handler does not stop
        the others from receiving the batch.
        """
        if not buffer:
            return

        if self._config.do_stdout:
            for log_msg in buffer:
                print(log_msg)

        results = await asyncio.gather(
            *(handler.push(list(buffer)) for handler in self._handlers),
            return_exceptions=True,
        )
        for handler, result in zip(self._handlers, results):
            if isinstance(result, Exception):
                sys.stderr.write(
                    f"Log handler {type(handler).__name__} failed; {result}\n"
                )

    async def _log_ingestor(self) -> None:
        """Loop that ingests queued messages and flushes them once the buffer
        is full or the oldest buffered message exceeds the flush interval.
        Exits after the shutdown sentinel, flushing what is left and closing
        every handler.
        """
        buffer: list[str] = []
        buffer_start_s = time_s()

        while True:
            if buffer:
                elapsed_s = time_s() - buffer_start_s
                timeout = max(0.0, self._config.flush_interval_s - elapsed_s)
            else:
                timeout = None

            try:
                log_msg = self._msg_queue.get(timeout=timeout)
            except queue.Empty:
                await self._flush_buffer(buffer)
                buffer = []
                continue

            # Shutdown sentinel.
            if log_msg is None:
                break

            if not buffer:
                buffer_start_s = time_s()
            buffer.append(log_msg)

            if (
                len(buffer) >= self._config.buffer_size
                or (time_s() - buffer_start_s) >= self._config.flush_interval_s
            ):
                await self._flush_buffer(buffer)
                buffer = []

        await self._flush_buffer(buffer)

        for handler in self._handlers:
            try:
                await handler.aclose()
            except Exception as exc:
                sys.stderr.write(
                    f"Log handler {type(handler).__name__} failed to close; {exc}\n"
                )

    def _process_log(self, level: LogLevel, msg: str):
        """Formats a log message and submits it to the queue.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        try:
            log_msg = self._config.str_format % {
                "asctime": time_iso8601(),
                "name": self._name,
                "levelname": level.name,
                "message": msg,
            }
            self._msg_queue.put_nowait(log_msg)
        except Exception:
            traceback.print_exc(file=sys.stderr)

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level} to {level}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message.

        Args:
            msg (str): The log message text.

        """
        valid_level = self._config.base_level == LogLevel.TRACE
        if self._is_running and valid_level:
            self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message.

        Args:
            msg (str): The log message text.

        """
        valid_level = self._config.base_level <= LogLevel.DEBUG
        if self._is_running and valid_level:
            self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message.

        Args:
            msg (str): The log message text.

        """
        valid_level = self._config.base_level <= LogLevel.INFO
        if self._is_running and valid_level:
            self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message.

        Args:
            msg (str): The log message text.

        """
        valid_level = self._config.base_level <= LogLevel.WARNING
        if self._is_running and valid_level:
            self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message.

        Args:
            msg (str): The log message text.

        """
        valid_level = self._config.base_level <= LogLevel.ERROR
        if self._is_running and valid_level:
            self._process_log(LogLevel.ERROR, msg)

    async def shutdown(self) -> None:
        """Shuts down the logger, waiting until all buffered messages are
        flushed and handlers are closed. Safe to call more than once.
        """
        if self._is_running:
            self._is_running = False
            self._msg_queue.put_nowait(None)
        await asyncio.to_thread(self._worker.join)

    def is_running(self) -> bool:
        """Check if the logger is accepting messages."""
        return self._is_running

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config


_default_loggers: dict[str, Logger] = {}
_default_loggers_lock = threading.Lock()


def get_default_logger(name: str) -> Logger:
    """Returns the process wide WARNING level stdout logger for `name`.

    Clients built without a logger share these instead of starting a
    worker thread each. A default logger that was shut down is replaced
    on the next call.
    """
    with _default_loggers_lock:
        logger = _default_loggers.get(name)
        if logger is None or not logger.is_running():
            logger = Logger(name=name, config=LoggerConfig.quiet())
            _default_loggers[name] = logger
        return logger
