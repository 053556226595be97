"""Logging setup for the mdsplit command line."""

from __future__ import annotations

import logging
import sys

from mdsplit.config import MDSPLIT_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = MDSPLIT_LOG_LEVEL) -> None:
    """Send ``mdsplit`` log records to stderr at ``level``.

    Only the package logger is touched, so embedding applications keep
    control of the root logger.
    """
    package_logger = logging.getLogger("mdsplit")
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``mdsplit`` namespace."""
    if name != "mdsplit" and not name.startswith("mdsplit."):
        name = f"mdsplit.{name}"
    return logging.getLogger(name)
