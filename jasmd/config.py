"""Responsibility: Centralize environment-driven logging configuration constants."""

import os  # Read environment variables for runtime configuration.
from pathlib import Path  # Construct the default state directory path.


def env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


APP_NAME = "jasmd"
APP_DIR_NAME = "jasm"

# XDG_STATE_HOME is looked up at resolve time so hosts can set it before init.
STATE_HOME_ENV = "XDG_STATE_HOME"
STATE_HOME_DEFAULT = Path(".local") / "state"
STATE_DIR_MODE = 0o700

LOG_FILE_NAME = f"{APP_NAME}.log"
CLIENTS_LOG_FILE_NAME = f"{APP_NAME}_clients.log"
LOG_FILE_MODE = 0o666

INFO_PREFIX = f"[{APP_NAME}] "
WARNING_PREFIX = "WARNING: "
DEBUG_PREFIX = "DEBUG: "
ERROR_PREFIX = "ERROR: "
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

DEBUG_DEFAULT = env_bool("JASMD_DEBUG", False)
