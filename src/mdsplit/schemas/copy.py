"""Copy outcome model."""

from __future__ import annotations

from enum import Enum


class CopyOutcome(str, Enum):
    """Which copy tier satisfied a request."""

    CLIPBOARD_API = "clipboard_api"
    LEGACY_EXEC = "legacy_exec"
    MANUAL_REQUIRED = "manual_required"
