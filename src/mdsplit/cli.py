"""Command line interface: list, show, and copy sections of a Markdown file."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from pydantic import TypeAdapter

from mdsplit.clipboard import default_copier
from mdsplit.config import MDSPLIT_DEFAULT_DEPTH, MDSPLIT_LOG_LEVEL
from mdsplit.copy_protocol import ClipboardCopier, ManualComplete, OnManualRequired
from mdsplit.output_formatter import format_outline
from mdsplit.sample import SAMPLE_MARKDOWN
from mdsplit.schemas import CodeToken, CopyOutcome, Section
from mdsplit.serializer import section_to_markdown
from mdsplit.splitter import SplitOptions, copy_code, copy_section, split_markdown
from mdsplit.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_SECTIONS_ADAPTER = TypeAdapter(list[Section])
_RULE = "-" * 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdsplit",
        description="Split Markdown at headings and copy sections or code blocks.",
    )
    parser.add_argument("file", nargs="?", help="Markdown file to read ('-' or omitted for stdin)")
    parser.add_argument(
        "--depth",
        type=int,
        choices=(1, 2, 3),
        default=MDSPLIT_DEFAULT_DEPTH,
        help="Deepest heading level that starts a section (default: %(default)s)",
    )
    parser.add_argument("--sample", action="store_true", help="Use the bundled sample document")
    parser.add_argument("--log-level", default=MDSPLIT_LOG_LEVEL, help="Logging level for stderr")

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--json", action="store_true", help="Print sections as JSON")
    action.add_argument("--show", type=int, metavar="N", help="Print the Markdown of section N")
    action.add_argument("--copy", type=int, metavar="N", help="Copy section N to the clipboard")
    action.add_argument(
        "--copy-code",
        metavar="N.M",
        help="Copy code block M of section N (as listed in the outline)",
    )
    parser.add_argument(
        "--fenced",
        action="store_true",
        help="With --copy-code, copy the block with its fences",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, copier: ClipboardCopier | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    source = _load_source(parser, args)
    sections = split_markdown(source, SplitOptions(depth=args.depth))
    logger.debug("Split into %d sections at depth %d", len(sections), args.depth)

    if args.json:
        print(_SECTIONS_ADAPTER.dump_json(sections, indent=2).decode("utf-8"))
        return 0

    if args.show is not None:
        print(section_to_markdown(_pick_section(parser, sections, args.show)))
        return 0

    if args.copy is not None:
        section = _pick_section(parser, sections, args.copy)
        outcome = _run_copy(
            lambda on_manual, on_complete: copy_section(
                section, copier or default_copier(), on_manual, on_manual_complete=on_complete
            )
        )
        _report(outcome, section.label)
        return 0

    if args.copy_code is not None:
        code = _pick_code(parser, sections, args.copy_code)
        outcome = _run_copy(
            lambda on_manual, on_complete: copy_code(
                code,
                copier or default_copier(),
                on_manual,
                fenced=args.fenced,
                on_manual_complete=on_complete,
            )
        )
        _report(outcome, f"code block {args.copy_code}")
        return 0

    print(format_outline(sections))
    return 0


def _load_source(parser: argparse.ArgumentParser, args: argparse.Namespace) -> str:
    if args.sample:
        return SAMPLE_MARKDOWN
    if args.file in (None, "-"):
        return sys.stdin.read()
    path = Path(args.file)
    if not path.is_file():
        parser.error(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def _pick_section(
    parser: argparse.ArgumentParser, sections: list[Section], number: int
) -> Section:
    if not 1 <= number <= len(sections):
        parser.error(f"No section {number}; the document has {len(sections)}")
    return sections[number - 1]


def _pick_code(parser: argparse.ArgumentParser, sections: list[Section], ref: str) -> CodeToken:
    section_part, _, block_part = ref.partition(".")
    try:
        section_number = int(section_part)
        block_number = int(block_part)
    except ValueError:
        parser.error(f"Code block reference must look like N.M, got {ref!r}")

    section = _pick_section(parser, sections, section_number)
    blocks = section.code_blocks()
    if not 1 <= block_number <= len(blocks):
        parser.error(f"Section {section_number} has no code block {block_number}")
    return blocks[block_number - 1][1]


def _run_copy(
    start_copy: Callable[[OnManualRequired, ManualComplete], Awaitable[CopyOutcome]],
) -> CopyOutcome:
    """Run one copy request, driving the manual hand-off from the terminal."""
    pending: list[ManualComplete | None] = []

    def on_manual_required(text: str, complete: ManualComplete | None) -> None:
        print("Clipboard unavailable. Copy the text below by hand:", file=sys.stderr)
        print(_RULE)
        print(text)
        print(_RULE)
        pending.append(complete)

    def on_manual_complete() -> None:
        print("Marked as copied.", file=sys.stderr)

    outcome = asyncio.run(start_copy(on_manual_required, on_manual_complete))

    if outcome is CopyOutcome.MANUAL_REQUIRED and pending and pending[0] is not None:
        if sys.stdin.isatty():
            input("Press Enter once you have copied the text... ")
            pending[0]()
    return outcome


def _report(outcome: CopyOutcome, what: str) -> None:
    if outcome is CopyOutcome.MANUAL_REQUIRED:
        logger.info("Manual copy requested for %s", what)
        return
    print(f"Copied {what} ({outcome.value})", file=sys.stderr)
