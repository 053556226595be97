"""Tokenize Markdown into headings, text runs, and fenced code blocks."""

from __future__ import annotations

import logging
import re

from mdsplit.schemas import CodeToken, HeadingToken, TextToken, Token

logger = logging.getLogger(__name__)

_OPEN_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")
_CLOSE_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})\s*$")
_HEADING_RE = re.compile(r"^(#{1,6})(?:\s+(.*))?$")


def tokenize(source: str) -> list[Token]:
    """Split Markdown source into a flat, ordered token sequence.

    Lines inside a fenced code block are never scanned for headings. A fence
    left open at the end of the input is emitted as plain text, opening line
    included, so no content is lost.

    Args:
        source: Raw Markdown text. Any line ending convention is accepted.

    Returns:
        Tokens in document order.
    """
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    tokens: list[Token] = []
    text_buffer: list[str] = []

    in_fence = False
    fence_marker = ""
    fence_line = ""
    fence_language: str | None = None
    fence_body: list[str] = []
    fence_start = 0

    def flush_text() -> None:
        if text_buffer:
            content = normalize_text_run(text_buffer)
            if content:
                tokens.append(TextToken(content=content))
            text_buffer.clear()

    for line_number, line in enumerate(lines, start=1):
        if in_fence:
            if _closes_fence(line, fence_marker):
                tokens.append(
                    CodeToken(
                        language=fence_language,
                        body="\n".join(fence_body),
                        fence=fence_marker,
                    )
                )
                in_fence = False
                fence_body = []
            else:
                fence_body.append(line)
            continue

        fence_match = _OPEN_FENCE_RE.match(line)
        if fence_match:
            flush_text()
            in_fence = True
            fence_marker = fence_match.group(1)
            fence_line = line
            fence_language = fence_match.group(2).strip() or None
            fence_body = []
            fence_start = line_number
            continue

        heading_match = _HEADING_RE.match(line)
        if heading_match:
            flush_text()
            tokens.append(
                HeadingToken(
                    level=len(heading_match.group(1)),
                    text=(heading_match.group(2) or "").strip(),
                )
            )
        else:
            text_buffer.append(line)

    flush_text()

    if in_fence:
        logger.debug("Unterminated fence opened at line %d kept as text", fence_start)
        content = normalize_text_run([fence_line, *fence_body])
        if content:
            tokens.append(TextToken(content=content))

    return tokens


def normalize_text_run(lines: list[str]) -> str:
    """Trim blank edge lines and collapse repeated blank lines to one.

    Blank means empty or whitespace-only. A single interior blank line is
    kept verbatim; two or more in a row become one empty line.
    """
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1

    result: list[str] = []
    blank_run: list[str] = []
    for line in lines[start:end]:
        if not line.strip():
            blank_run.append(line)
            continue
        if blank_run:
            result.extend(blank_run if len(blank_run) == 1 else [""])
            blank_run = []
        result.append(line)
    return "\n".join(result)


def _closes_fence(line: str, marker: str) -> bool:
    match = _CLOSE_FENCE_RE.match(line)
    if not match:
        return False
    closing = match.group(1)
    return closing[0] == marker[0] and len(closing) >= len(marker)
