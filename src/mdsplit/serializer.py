"""Render sections and code blocks back into literal Markdown."""

from __future__ import annotations

from mdsplit.schemas import CodeToken, HeadingToken, Section, TextToken, Token


def section_to_markdown(section: Section) -> str:
    """Reconstruct the Markdown of a section, heading line first.

    Blank lines at either end are dropped; indentation and trailing spaces on
    content lines are kept so the output tokenizes back to the same members.
    """
    lines = "\n".join(token_to_markdown(member) for member in section.members).split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


def code_to_markdown(code: CodeToken) -> str:
    """Render a single code block in its fenced form."""
    return token_to_markdown(code)


def token_to_markdown(token: Token) -> str:
    """Render one token as the Markdown line(s) it came from."""
    if isinstance(token, HeadingToken):
        return f"{'#' * token.level} {token.text}"
    if isinstance(token, TextToken):
        return token.content
    if isinstance(token, CodeToken):
        return "\n".join([f"{token.fence}{token.language or ''}", token.body, token.fence])
    raise TypeError(f"Unsupported token type: {type(token).__name__}")
