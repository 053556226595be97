"""Group tokens into sections at heading boundaries."""

from __future__ import annotations

from typing import Iterable, Literal
from uuid import uuid4

from mdsplit.schemas import HeadingToken, Section, Token

Depth = Literal[1, 2, 3]


def segment(tokens: Iterable[Token], depth: Depth) -> list[Section]:
    """Split a token sequence into sections.

    Headings with ``level <= depth`` open a new section and become its first
    member. Deeper headings and all other tokens join the open section;
    tokens before the first boundary heading form a headingless section.
    Sections without members are dropped.

    Args:
        tokens: Output of :func:`mdsplit.tokenizer.tokenize`.
        depth: Deepest heading level that starts a section (1, 2 or 3).

    Returns:
        Sections in document order, indexed from zero.
    """
    groups: list[tuple[HeadingToken | None, list[Token]]] = []

    for token in tokens:
        if isinstance(token, HeadingToken) and token.level <= depth:
            groups.append((token, [token]))
            continue
        if not groups:
            groups.append((None, []))
        groups[-1][1].append(token)

    run_tag = uuid4().hex[:6]
    sections: list[Section] = []
    for position, (heading, members) in enumerate(groups):
        if not members:
            continue
        sections.append(
            Section(
                id=f"seg_{position}_{run_tag}",
                index=len(sections),
                heading=heading,
                members=members,
            )
        )
    return sections
