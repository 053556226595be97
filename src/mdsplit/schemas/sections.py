"""Section models produced by the segmenter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mdsplit.schemas.tokens import CodeToken, HeadingToken, Token


class Section(BaseModel):
    """One copyable unit of a split document.

    When ``heading`` is set it is also the first entry of ``members``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    index: int = Field(..., ge=0)
    heading: HeadingToken | None = None
    members: list[Token] = Field(default_factory=list)

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``Section 2 · H2: Usage``."""
        label = f"Section {self.index + 1}"
        if self.heading is not None:
            label += f" · H{self.heading.level}: {self.heading.text}"
        return label

    def code_blocks(self) -> list[tuple[str, CodeToken]]:
        """Return code members keyed by ``<section id>#<member index>``."""
        return [
            (f"{self.id}#{position}", member)
            for position, member in enumerate(self.members)
            if isinstance(member, CodeToken)
        ]
