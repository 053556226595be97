"""Local configuration for mdsplit."""

from __future__ import annotations

import os


DEFAULT_DEPTH = 3
DEFAULT_CLIPBOARD_TIMEOUT_S = 5.0
DEFAULT_LOG_LEVEL = "WARNING"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Heading depth used by the CLI and split_markdown() when none is given.
MDSPLIT_DEFAULT_DEPTH = int(os.getenv("MDSPLIT_DEFAULT_DEPTH", str(DEFAULT_DEPTH)))
# Explicit clipboard command line, e.g. "xclip -selection clipboard".
MDSPLIT_CLIPBOARD_COMMAND = os.getenv("MDSPLIT_CLIPBOARD_COMMAND") or None
MDSPLIT_CLIPBOARD_TIMEOUT_S = float(
    os.getenv("MDSPLIT_CLIPBOARD_TIMEOUT_S", str(DEFAULT_CLIPBOARD_TIMEOUT_S))
)
MDSPLIT_DISABLE_NATIVE_CLIPBOARD = _env_flag("MDSPLIT_DISABLE_NATIVE_CLIPBOARD")
MDSPLIT_DISABLE_LEGACY_CLIPBOARD = _env_flag("MDSPLIT_DISABLE_LEGACY_CLIPBOARD")
MDSPLIT_LOG_LEVEL = os.getenv("MDSPLIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
