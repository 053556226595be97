"""Desktop clipboard backends for the tiered copy protocol."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import shutil
import subprocess
import sys
from typing import Mapping, Sequence

from mdsplit.config import (
    MDSPLIT_CLIPBOARD_COMMAND,
    MDSPLIT_CLIPBOARD_TIMEOUT_S,
    MDSPLIT_DISABLE_LEGACY_CLIPBOARD,
    MDSPLIT_DISABLE_NATIVE_CLIPBOARD,
)
from mdsplit.copy_protocol import ClipboardCopier
from mdsplit.exceptions import ClipboardUnavailableError, ClipboardWriteError

logger = logging.getLogger(__name__)

_WAYLAND_COMMANDS: tuple[tuple[str, ...], ...] = (("wl-copy",),)
_X11_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)

# Platforms whose clipboard keeps Tk's data after the window is destroyed.
# On X11 the owning window serves the selection, so it dies with the holder.
_PERSISTENT_TK_CLIPBOARD_PLATFORMS = frozenset({"darwin", "win32", "cygwin"})


def resolve_clipboard_command(
    *,
    platform: str | None = None,
    env: Mapping[str, str] | None = None,
    override: str | None = MDSPLIT_CLIPBOARD_COMMAND,
) -> list[str] | None:
    """Pick the clipboard command for this platform.

    Args:
        platform: Value of ``sys.platform`` to resolve for.
        env: Environment used to detect Wayland/X11 sessions.
        override: Explicit command line; wins when its program is on PATH.

    Returns:
        The argv to run, or None when no usable command exists.
    """
    platform = platform or sys.platform
    env = os.environ if env is None else env

    if override:
        argv = shlex.split(override)
        return argv if argv and shutil.which(argv[0]) else None

    candidates: list[tuple[str, ...]] = []
    if platform == "darwin":
        candidates.append(("pbcopy",))
    elif platform in {"win32", "cygwin"}:
        candidates.append(("clip",))
    else:
        if env.get("WAYLAND_DISPLAY"):
            candidates.extend(_WAYLAND_COMMANDS)
        if env.get("DISPLAY"):
            candidates.extend(_X11_COMMANDS)

    for candidate in candidates:
        if shutil.which(candidate[0]):
            return list(candidate)
    return None


class CommandClipboard:
    """Native clipboard write through the platform clipboard command."""

    def __init__(
        self,
        command: Sequence[str] | None = None,
        *,
        timeout_s: float = MDSPLIT_CLIPBOARD_TIMEOUT_S,
    ) -> None:
        self.command = list(command) if command else resolve_clipboard_command()
        self.timeout_s = timeout_s

    def is_secure_context(self) -> bool:
        return bool(self.command) and shutil.which(self.command[0]) is not None

    async def write_text(self, text: str) -> None:
        """Pipe ``text`` into the clipboard command.

        Raises:
            ClipboardUnavailableError: If no command is configured or found.
            ClipboardWriteError: If the command fails or times out.
        """
        if not self.command:
            raise ClipboardUnavailableError("No clipboard command available")

        try:
            # Blocking call wrapped in thread
            result = await asyncio.to_thread(
                subprocess.run,
                self.command,
                input=text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout_s,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ClipboardUnavailableError(
                f"Clipboard command not found: {self.command[0]}"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardWriteError(
                f"Clipboard command timed out after {self.timeout_s}s"
            ) from exc

        if result.returncode != 0:
            raise ClipboardWriteError(
                f"{self.command[0]} exited with {result.returncode}: {result.stderr.strip()}"
            )


class TkTextHolder:
    """Withdrawn Tk window with an off-screen Text widget.

    Raises:
        ClipboardUnavailableError: If tkinter is missing or no display exists.
    """

    def __init__(self) -> None:
        try:
            import tkinter
        except ImportError as exc:  # pragma: no cover - depends on the Python build
            raise ClipboardUnavailableError("tkinter is not available") from exc

        self._tcl_error = tkinter.TclError
        try:
            self._root = tkinter.Tk()
        except tkinter.TclError as exc:
            raise ClipboardUnavailableError(f"Tk could not start: {exc}") from exc

        try:
            self._root.withdraw()
            self._root.geometry("1x1+-10000+-10000")
            self._widget = tkinter.Text(self._root)
            self._widget.pack()
            self._widget.focus_set()
        except tkinter.TclError as exc:
            self._root.destroy()
            raise ClipboardUnavailableError(f"Tk text widget could not start: {exc}") from exc
        except Exception:
            self._root.destroy()
            raise
        self._text = ""

    def set_text(self, text: str) -> None:
        self._text = text
        self._widget.delete("1.0", "end")
        self._widget.insert("1.0", text)

    def select_all(self) -> None:
        self._widget.tag_add("sel", "1.0", "end-1c")

    def exec_copy(self) -> bool:
        """Fire the widget's copy event and check the clipboard took it."""
        self._root.clipboard_clear()
        self._widget.event_generate("<<Copy>>")
        self._root.update()
        try:
            return self._root.clipboard_get() == self._text
        except self._tcl_error:
            return False

    def remove(self) -> None:
        self._root.destroy()


class TkSelectionSurface:
    """Creates a fresh :class:`TkTextHolder` per copy request."""

    def __init__(self, platform: str | None = None) -> None:
        self.platform = platform or sys.platform

    def create_text_holder(self) -> TkTextHolder:
        """Build a holder for one copy.

        Raises:
            ClipboardUnavailableError: On platforms where the copied text
                would not outlive the holder, or when Tk cannot start.
        """
        if self.platform not in _PERSISTENT_TK_CLIPBOARD_PLATFORMS:
            raise ClipboardUnavailableError(
                f"Tk clipboard does not persist on {self.platform}"
            )
        return TkTextHolder()


def default_copier() -> ClipboardCopier:
    """Build a copier from the desktop backends enabled in config."""
    native = None if MDSPLIT_DISABLE_NATIVE_CLIPBOARD else CommandClipboard()
    legacy = None if MDSPLIT_DISABLE_LEGACY_CLIPBOARD else TkSelectionSurface()
    if native is not None and not native.command:
        logger.debug("No clipboard command found; native tier disabled")
    return ClipboardCopier(native=native, legacy=legacy)
