"""mdsplit: split Markdown at headings and copy sections out."""

from mdsplit.copy_protocol import ClipboardCopier
from mdsplit.exceptions import (
    ClipboardError,
    ClipboardUnavailableError,
    ClipboardWriteError,
    MdsplitError,
)
from mdsplit.schemas import (
    CodeToken,
    CopyOutcome,
    HeadingToken,
    Section,
    TextToken,
    Token,
)
from mdsplit.segmenter import segment
from mdsplit.serializer import code_to_markdown, section_to_markdown
from mdsplit.splitter import SplitOptions, copy_code, copy_section, split_markdown
from mdsplit.tokenizer import tokenize

__all__ = [
    "ClipboardCopier",
    "ClipboardError",
    "ClipboardUnavailableError",
    "ClipboardWriteError",
    "CodeToken",
    "CopyOutcome",
    "HeadingToken",
    "MdsplitError",
    "Section",
    "SplitOptions",
    "TextToken",
    "Token",
    "code_to_markdown",
    "copy_code",
    "copy_section",
    "section_to_markdown",
    "segment",
    "split_markdown",
    "tokenize",
]
