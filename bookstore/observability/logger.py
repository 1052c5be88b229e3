"""
Structured logging for the bookstore loader

Module loggers live under the "bookstore" hierarchy and propagate to the
application logger, which owns the only handler. The handler writes JSON
(python-json-logger) or plain text to stderr or to a log file, so stdout
stays free for report output.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

APP_LOGGER_NAME = "bookstore"

JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(module)s:%(lineno)d] %(message)s"


class BookstoreJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter emitting one object per line.

    Every entry carries timestamp, level, logger and the source location
    (module, function, line) next to the message and any `extra` fields.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        # fields named in the format string arrive pre-filled with None
        log_record["timestamp"] = log_record.get("timestamp") or self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record.update(module=record.module, function=record.funcName, line=record.lineno)


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handler(log_file: str | None, format_type: str) -> logging.Handler:
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    if format_type == "json":
        handler.setFormatter(BookstoreJsonFormatter(JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logger(
    name: str = APP_LOGGER_NAME,
    level: str | None = None,
    format_type: str = "text",
    log_file: str | None = None,
) -> logging.Logger:
    """
    Configure a logger with a single handler.

    Calling it again replaces the previous handler, so the CLI can
    reconfigure the application logger once settings are known.

    Args:
        name: Logger name
        level: Level name; falls back to $LOG_LEVEL, then INFO
        format_type: "json" or "text"
        log_file: Write to this file instead of stderr

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    for stale in list(logger.handlers):
        logger.removeHandler(stale)
        stale.close()

    logger.addHandler(_build_handler(log_file, format_type))
    logger.propagate = False
    return logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """
    Return a logger inside the bookstore hierarchy.

    Names outside the hierarchy are prefixed with "bookstore.". The
    application logger gets a default stderr handler on first use.
    """
    if not logging.getLogger(APP_LOGGER_NAME).handlers:
        setup_logger(APP_LOGGER_NAME)

    if name != APP_LOGGER_NAME and not name.startswith(APP_LOGGER_NAME + "."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class log_operation:
    """
    Log the start, end and duration of a block.

    Usage:
        with log_operation("Loading bookstore data", logger=logger, data_dir="data") as op:
            ...
        op.duration  # seconds
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.fields = fields
        self.duration: float | None = None
        self._started: float | None = None

    def _extra(self, **more) -> dict:
        return {"operation": self.operation_name, **self.fields, **more}

    # stacklevel=2 attributes the entries to the `with` statement, not this class
    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.info(f"Starting: {self.operation_name}", extra=self._extra(), stacklevel=2)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self._started
        elapsed = round(self.duration, 3)

        if exc_type is not None:
            # the traceback is only useful when debugging; callers report the error itself
            self.logger.error(
                f"Failed: {self.operation_name}: {exc_val}",
                extra=self._extra(duration_seconds=elapsed, status="error", error_type=exc_type.__name__),
                exc_info=(exc_type, exc_val, exc_tb) if self.logger.isEnabledFor(logging.DEBUG) else None,
                stacklevel=2,
            )
            return False

        self.logger.info(
            f"Completed: {self.operation_name} in {self.duration * 1000:.0f} ms",
            extra=self._extra(duration_seconds=elapsed, status="success"),
            stacklevel=2,
        )
        return False
