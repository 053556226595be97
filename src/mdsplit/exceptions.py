"""Custom exceptions for mdsplit."""


class MdsplitError(Exception):
    """Base exception for mdsplit operations."""


class ClipboardError(MdsplitError):
    """Error while writing to the system clipboard."""


class ClipboardUnavailableError(ClipboardError):
    """No usable clipboard backend in this environment."""


class ClipboardWriteError(ClipboardError):
    """The clipboard backend was found but the write failed."""
