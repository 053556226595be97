"""Tiered clipboard copy: native write, legacy selection copy, manual hand-off."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from mdsplit.schemas import CopyOutcome

logger = logging.getLogger(__name__)

ManualComplete = Callable[[], None]
OnManualRequired = Callable[[str, Optional[ManualComplete]], None]


class NativeClipboard(Protocol):
    """Asynchronous clipboard write capability (tier 1)."""

    def is_secure_context(self) -> bool:
        """Return True when the capability may be used at all."""
        ...

    async def write_text(self, text: str) -> None:
        """Write ``text`` to the clipboard, raising on any failure."""
        ...


class TextHolder(Protocol):
    """Transient, off-screen, focusable element holding the text to copy."""

    def set_text(self, text: str) -> None: ...

    def select_all(self) -> None: ...

    def exec_copy(self) -> bool: ...

    def remove(self) -> None: ...


class SelectionSurface(Protocol):
    """Factory for transient text holders (tier 2)."""

    def create_text_holder(self) -> TextHolder: ...


class ClipboardCopier:
    """Copy text through the first tier that works.

    Tiers are tried once each, in order: ``native`` (only in a secure
    context), then ``legacy``, then the manual hand-off callback. Tier
    failures are logged and never raised to the caller.

    Args:
        native: Tier 1 backend, or None to skip it.
        legacy: Tier 2 backend, or None to skip it.
    """

    def __init__(
        self,
        native: NativeClipboard | None = None,
        legacy: SelectionSurface | None = None,
    ) -> None:
        self._native = native
        self._legacy = legacy

    async def copy(
        self,
        text: str,
        on_manual_required: OnManualRequired,
        *,
        on_manual_complete: ManualComplete | None = None,
    ) -> CopyOutcome:
        """Deliver ``text`` to the clipboard and report which tier did it.

        Args:
            text: Literal text to copy.
            on_manual_required: Called once, synchronously, with the text and
                a completion callback when both automated tiers fail.
            on_manual_complete: Fired at most once, when the presentation
                surface reports that the user copied the text by hand.

        Returns:
            The tier that satisfied the request.
        """
        if await self._try_native(text):
            return CopyOutcome.CLIPBOARD_API

        if self._try_legacy(text):
            return CopyOutcome.LEGACY_EXEC

        completion = _call_once(on_manual_complete) if on_manual_complete else None
        on_manual_required(text, completion)
        return CopyOutcome.MANUAL_REQUIRED

    async def _try_native(self, text: str) -> bool:
        if self._native is None:
            return False
        try:
            if not self._native.is_secure_context():
                logger.debug("Native clipboard skipped: not a secure context")
                return False
            await self._native.write_text(text)
        except Exception as exc:
            logger.debug("Native clipboard write failed: %s", exc)
            return False
        return True

    def _try_legacy(self, text: str) -> bool:
        if self._legacy is None:
            return False
        try:
            holder = self._legacy.create_text_holder()
        except Exception as exc:
            logger.warning("Could not create transient copy element: %s", exc)
            return False

        try:
            holder.set_text(text)
            holder.select_all()
            copied = holder.exec_copy()
        except Exception as exc:
            logger.warning("Legacy copy command failed: %s", exc)
            return False
        finally:
            _remove_holder(holder)

        if not copied:
            logger.warning("Legacy copy command reported failure")
            return False
        return True


def _remove_holder(holder: TextHolder) -> None:
    try:
        holder.remove()
    except Exception as exc:
        logger.warning("Could not remove transient copy element: %s", exc)


def _call_once(callback: ManualComplete) -> ManualComplete:
    fired = False

    def complete() -> None:
        nonlocal fired
        if fired:
            return
        fired = True
        callback()

    return complete
