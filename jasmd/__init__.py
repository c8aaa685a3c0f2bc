"""Responsibility: Package exports for jasmd daemon logging."""

from .logging_utils import (
    REGISTRY,
    LoggerRegistry,
    TeeStream,
    debug,
    debug_enabled,
    error,
    error_logger,
    info,
    init_log,
    set_debug,
    warning,
)
from .state_utils import LogInitError, close_log, init_client_log, resolve_state_dir

__all__ = [
    "REGISTRY",
    "LogInitError",
    "LoggerRegistry",
    "TeeStream",
    "close_log",
    "debug",
    "debug_enabled",
    "error",
    "error_logger",
    "info",
    "init_client_log",
    "init_log",
    "resolve_state_dir",
    "set_debug",
    "warning",
]
