"""Responsibility: Leveled daemon loggers that write to stderr and the state log file."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Mapping
from typing import TextIO

from . import config
from .config import (
    APP_NAME,
    DEBUG_PREFIX,
    ERROR_PREFIX,
    INFO_PREFIX,
    LOG_DATE_FORMAT,
    WARNING_PREFIX,
)
from .state_utils import open_log_file


class TeeStream:
    """Duplicate every write to each wrapped stream, in order."""

    def __init__(self, *streams: TextIO) -> None:
        self._streams = streams
        self._lock = threading.Lock()

    def write(self, text: str) -> int:
        with self._lock:
            for stream in self._streams:
                stream.write(text)
        return len(text)

    def flush(self) -> None:
        with self._lock:
            for stream in self._streams:
                stream.flush()


class _BestEffortHandler(logging.StreamHandler):
    def handleError(self, record: logging.LogRecord) -> None:
        # Failed writes are dropped without a traceback.
        return None


def render_message(message: str, args: tuple) -> str:
    if not args:
        return message
    values: object = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return message % values
    except (TypeError, ValueError, KeyError):
        return " ".join([message, *(repr(arg) for arg in args)])


def _private_logger(name: str) -> logging.Logger:
    # Built outside logging.getLogger so registries sharing a name stay separate.
    logger = logging.Logger(name, logging.DEBUG)
    logger.propagate = False
    return logger


def _discard_logger() -> logging.Logger:
    logger = _private_logger(f"{APP_NAME}.discard")
    logger.addHandler(logging.NullHandler())
    return logger


class LoggerRegistry:
    """Holds the debug, info, warning and error loggers plus the debug toggle.

    Every method is safe to call before ``bind``: calls are dropped until a
    log stream has been attached. Binding again replaces the previous
    loggers, so the last initializer wins. Loggers are private to each
    registry; two registries never share output even with the same name.
    """

    def __init__(self, name: str = APP_NAME, *, debug_enabled: bool | None = None) -> None:
        self.name = name
        self.debug_enabled = config.DEBUG_DEFAULT if debug_enabled is None else debug_enabled
        self._debug: logging.Logger | None = None
        self._info: logging.Logger | None = None
        self._warning: logging.Logger | None = None
        self._error: logging.Logger | None = None

    @property
    def initialized(self) -> bool:
        return self._info is not None

    def bind(self, log_file: TextIO, *, stderr: TextIO | None = None) -> None:
        stream = TeeStream(sys.stderr if stderr is None else stderr, log_file)
        self._info = self._build_logger("info", INFO_PREFIX, stream, with_location=False)
        self._warning = self._build_logger("warning", WARNING_PREFIX, stream)
        self._debug = self._build_logger("debug", DEBUG_PREFIX, stream)
        self._error = self._build_logger("error", ERROR_PREFIX, stream)

    def _build_logger(
        self,
        level_name: str,
        prefix: str,
        stream: TeeStream,
        *,
        with_location: bool = True,
    ) -> logging.Logger:
        logger = _private_logger(f"{self.name}.{level_name}")
        tag = prefix.replace("%", "%%")
        if with_location:
            fmt = f"{tag}%(asctime)s %(filename)s:%(lineno)d: %(message)s"
        else:
            fmt = f"{tag}%(message)s"
        handler = _BestEffortHandler(stream)
        handler.setFormatter(logging.Formatter(fmt, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        return logger

    def _emit(self, logger: logging.Logger | None, level: int, message: str, args: tuple, stacklevel: int) -> None:
        if logger is None:
            return
        # stacklevel counts from _emit; +2 skips it and the level method.
        logger.log(level, render_message(message, args), stacklevel=stacklevel + 2)

    def debug(self, message: str, *args: object, stacklevel: int = 1) -> None:
        if not self.debug_enabled:
            return
        self._emit(self._debug, logging.DEBUG, message, args, stacklevel)

    def info(self, message: str, *args: object, stacklevel: int = 1) -> None:
        self._emit(self._info, logging.INFO, message, args, stacklevel)

    def warning(self, message: str, *args: object, stacklevel: int = 1) -> None:
        self._emit(self._warning, logging.WARNING, message, args, stacklevel)

    def error(self, message: str, *args: object, stacklevel: int = 1) -> None:
        self._emit(self._error, logging.ERROR, message, args, stacklevel)

    def error_logger(self) -> logging.Logger:
        if self._error is None:
            return _discard_logger()
        return self._error


REGISTRY = LoggerRegistry()


def init_log(registry: LoggerRegistry | None = None, *, stderr: TextIO | None = None) -> TextIO:
    """Open the daemon log and bind the level loggers to it.

    Returns the open log file; the caller closes it on shutdown. Raises
    ``LogInitError`` without touching the registry if the state directory or
    the file cannot be prepared.
    """
    target = REGISTRY if registry is None else registry
    log_file = open_log_file()
    target.bind(log_file, stderr=stderr)
    return log_file


def set_debug(enabled: bool) -> None:
    REGISTRY.debug_enabled = enabled


def debug_enabled() -> bool:
    return REGISTRY.debug_enabled


def debug(message: str, *args: object) -> None:
    REGISTRY.debug(message, *args, stacklevel=2)


def info(message: str, *args: object) -> None:
    REGISTRY.info(message, *args, stacklevel=2)


def warning(message: str, *args: object) -> None:
    REGISTRY.warning(message, *args, stacklevel=2)


def error(message: str, *args: object) -> None:
    REGISTRY.error(message, *args, stacklevel=2)


def error_logger() -> logging.Logger:
    return REGISTRY.error_logger()
