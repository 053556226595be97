"""Format split sections into a summary and outline."""

from __future__ import annotations

from typing import Iterable

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from mdsplit.schemas import CodeToken, Section
from mdsplit.serializer import section_to_markdown


def format_outline(sections: list[Section]) -> str:
    """Create a summary block followed by one line per section and code block."""
    summary_lines = [f"Sections: {len(sections)}"]
    summary_lines.append(f"Code blocks: {count_code_blocks(sections)}")

    token_estimate = _format_token_count(
        "\n\n".join(section_to_markdown(section) for section in sections)
    )
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    outline_lines: list[str] = []
    for section in sections:
        outline_lines.append(section.label)
        for number, (_, code) in enumerate(section.code_blocks(), start=1):
            outline_lines.append(f"    [{code_ref(section, number)}] {code_label(code)}")

    if not outline_lines:
        outline_lines.append("Nothing to split.")

    return "\n".join(summary_lines) + "\n\n" + "\n".join(outline_lines)


def count_code_blocks(sections: Iterable[Section]) -> int:
    """Count code blocks across all sections."""
    return sum(len(section.code_blocks()) for section in sections)


def code_ref(section: Section, number: int) -> str:
    """Stable, 1-based reference for a code block, e.g. ``2.1``."""
    return f"{section.index + 1}.{number}"


def code_label(code: CodeToken) -> str:
    return f"code ({code.language})" if code.language else "code"


def _format_token_count(text: str) -> str | None:
    if not tiktoken or not text:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
