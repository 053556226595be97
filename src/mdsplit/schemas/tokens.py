"""Token models produced by the tokenizer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class HeadingToken(BaseModel):
    """An ATX heading line outside any fenced code block."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    text: str


class TextToken(BaseModel):
    """A normalized run of lines that are neither headings nor fences."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    content: str


class CodeToken(BaseModel):
    """A fenced code block.

    Attributes:
        language: Info string of the opening fence, or None when absent.
        body: Literal lines between the fences, joined by newlines.
        fence: Opening marker (e.g. "```" or "~~~~"), reused on serialization.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    language: str | None = None
    body: str
    fence: str = "```"


Token = Annotated[
    Union[HeadingToken, TextToken, CodeToken],
    Field(discriminator="kind"),
]
