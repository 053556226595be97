"""Shared schemas for mdsplit."""

from mdsplit.schemas.copy import CopyOutcome
from mdsplit.schemas.sections import Section
from mdsplit.schemas.tokens import CodeToken, HeadingToken, TextToken, Token

__all__ = [
    "CodeToken",
    "CopyOutcome",
    "HeadingToken",
    "Section",
    "TextToken",
    "Token",
]
