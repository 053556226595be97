"""Split pipeline: Markdown -> sections, and copy entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mdsplit.config import MDSPLIT_DEFAULT_DEPTH
from mdsplit.copy_protocol import ClipboardCopier, ManualComplete, OnManualRequired
from mdsplit.schemas import CodeToken, CopyOutcome, Section
from mdsplit.segmenter import Depth, segment
from mdsplit.serializer import code_to_markdown, section_to_markdown
from mdsplit.tokenizer import tokenize


@dataclass
class SplitOptions:
    """Options for splitting a document.

    Attributes:
        depth: Deepest heading level that starts a new section (1, 2 or 3).
    """

    depth: Depth = MDSPLIT_DEFAULT_DEPTH  # type: ignore[assignment]


def split_markdown(source: str, options: SplitOptions | None = None) -> list[Section]:
    """Tokenize and segment ``source`` in one call."""
    opts = options or SplitOptions()
    return segment(tokenize(source), opts.depth)


async def copy_section(
    section: Section,
    copier: ClipboardCopier,
    on_manual_required: OnManualRequired,
    *,
    on_manual_complete: ManualComplete | None = None,
) -> CopyOutcome:
    """Copy the Markdown of a whole section."""
    return await copier.copy(
        section_to_markdown(section),
        on_manual_required,
        on_manual_complete=on_manual_complete,
    )


async def copy_code(
    code: CodeToken,
    copier: ClipboardCopier,
    on_manual_required: OnManualRequired,
    *,
    fenced: bool = False,
    on_manual_complete: ManualComplete | None = None,
) -> CopyOutcome:
    """Copy a code block's literal body, or its fenced form when ``fenced``."""
    text = code_to_markdown(code) if fenced else code.body
    return await copier.copy(
        text,
        on_manual_required,
        on_manual_complete=on_manual_complete,
    )


def find_code_block(sections: Iterable[Section], code_id: str) -> CodeToken:
    """Look up a code block by its ``<section id>#<member index>`` id.

    Raises:
        KeyError: If no section holds a code block with that id.
    """
    for section in sections:
        for block_id, code in section.code_blocks():
            if block_id == code_id:
                return code
    raise KeyError(code_id)
