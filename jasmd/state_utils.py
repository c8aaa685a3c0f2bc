import os
from pathlib import Path
from typing import TextIO

from .config import (
    APP_DIR_NAME,
    CLIENTS_LOG_FILE_NAME,
    LOG_FILE_MODE,
    LOG_FILE_NAME,
    STATE_DIR_MODE,
    STATE_HOME_DEFAULT,
    STATE_HOME_ENV,
)


class LogInitError(RuntimeError):
    """Raised when the state directory or a log file cannot be prepared."""


def resolve_state_dir() -> Path:
    """Return the daemon state directory, creating it with owner-only permissions."""
    state_home = os.environ.get(STATE_HOME_ENV)
    if state_home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise LogInitError(f"could not resolve home directory: {exc}") from exc
        base = home / STATE_HOME_DEFAULT
    else:
        base = Path(state_home)

    state_dir = base / APP_DIR_NAME
    try:
        state_dir.mkdir(mode=STATE_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise LogInitError(str(exc)) from exc
    return state_dir


def open_append_log(path: Path) -> TextIO:
    fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, LOG_FILE_MODE)
    return os.fdopen(fd, "a", encoding="utf-8", buffering=1)


def open_log_file() -> TextIO:
    state_dir = resolve_state_dir()
    try:
        return open_append_log(state_dir / LOG_FILE_NAME)
    except OSError as exc:
        raise LogInitError(f"open log file: {exc}") from exc


def init_client_log() -> TextIO:
    """Open the client activity log. No logger is attached to it here."""
    state_dir = resolve_state_dir()
    try:
        return open_append_log(state_dir / CLIENTS_LOG_FILE_NAME)
    except OSError as exc:
        raise LogInitError(f"open clients log file: {exc}") from exc


def close_log(handle: TextIO) -> None:
    handle.close()
