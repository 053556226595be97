"""Tests for the Markdown tokenizer."""

from __future__ import annotations

import pytest

from mdsplit.schemas import CodeToken, HeadingToken, TextToken
from mdsplit.tokenizer import normalize_text_run, tokenize


class TestHeadings:
    """Tests for heading recognition outside fences."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels_one_to_six(self, level: int) -> None:
        """Counts leading hashes as the level."""
        tokens = tokenize(f"{'#' * level} Title")
        assert tokens == [HeadingToken(level=level, text="Title")]

    def test_text_is_trimmed(self) -> None:
        """Strips whitespace around the heading text."""
        assert tokenize("##   Spaced out   ") == [HeadingToken(level=2, text="Spaced out")]

    def test_requires_whitespace_after_hashes(self) -> None:
        """A hashtag-like line stays plain text."""
        assert tokenize("#hashtag") == [TextToken(content="#hashtag")]

    def test_seven_hashes_is_text(self) -> None:
        """Only levels 1 to 6 are headings."""
        assert tokenize("####### Too deep") == [TextToken(content="####### Too deep")]

    @pytest.mark.parametrize("line", ["#", "# ", "###   "])
    def test_bare_hashes_are_empty_heading(self, line: str) -> None:
        """Hashes with no text are a heading with empty text."""
        level = line.count("#")
        assert tokenize(line) == [HeadingToken(level=level, text="")]

    def test_heading_flushes_pending_text(self) -> None:
        """Text before a heading is emitted first."""
        tokens = tokenize("intro\n# Title\nbody")
        assert tokens == [
            TextToken(content="intro"),
            HeadingToken(level=1, text="Title"),
            TextToken(content="body"),
        ]


class TestFences:
    """Tests for fenced code blocks."""

    def test_backtick_fence_with_language(self) -> None:
        """Extracts language tag and literal body."""
        tokens = tokenize("```python\nprint('hi')\n```")
        assert tokens == [CodeToken(language="python", body="print('hi')")]

    def test_fence_without_language(self) -> None:
        """Language is None when the info string is empty."""
        tokens = tokenize("```\nraw\n```")
        assert tokens == [CodeToken(language=None, body="raw")]

    def test_tilde_fence(self) -> None:
        """Tildes open and close a fence too."""
        tokens = tokenize("~~~sh\nls -la\n~~~")
        assert tokens == [CodeToken(language="sh", body="ls -la", fence="~~~")]

    def test_headings_inside_fence_are_body(self) -> None:
        """Heading-looking lines inside a fence never become headings."""
        tokens = tokenize("```md\n# not a heading\n## nor this\n```")
        assert tokens == [CodeToken(language="md", body="# not a heading\n## nor this")]
        assert not any(isinstance(token, HeadingToken) for token in tokens)

    def test_body_is_verbatim(self) -> None:
        """Blank lines and indentation in the body are kept."""
        body = "def f():\n\n\n\n    return 1"
        tokens = tokenize(f"```py\n{body}\n```")
        assert tokens == [CodeToken(language="py", body=body)]

    def test_mismatched_marker_does_not_close(self) -> None:
        """A tilde line cannot close a backtick fence."""
        tokens = tokenize("```\na\n~~~\nb\n```")
        assert tokens == [CodeToken(language=None, body="a\n~~~\nb")]

    def test_shorter_marker_does_not_close(self) -> None:
        """A longer opening fence needs an equally long close."""
        tokens = tokenize("````md\n```js\nx\n```\n````")
        assert tokens == [CodeToken(language="md", body="```js\nx\n```", fence="````")]

    def test_closing_line_with_trailing_content_is_body(self) -> None:
        """Only a bare marker closes the fence."""
        tokens = tokenize("```\na\n```js\n```")
        assert tokens == [CodeToken(language=None, body="a\n```js")]

    def test_fence_flushes_pending_text(self) -> None:
        """Text before a fence is emitted before the code token."""
        tokens = tokenize("before\n```\ncode\n```\nafter")
        assert tokens == [
            TextToken(content="before"),
            CodeToken(language=None, body="code"),
            TextToken(content="after"),
        ]

    def test_empty_fence(self) -> None:
        """An empty block produces an empty body."""
        assert tokenize("```\n```") == [CodeToken(language=None, body="")]


class TestUnterminatedFence:
    """Tests for the unterminated fence degradation."""

    def test_reclassified_as_text(self) -> None:
        """Fence line and body come back as one text token."""
        tokens = tokenize("# T\n```js\nconsole.log(1)")
        assert tokens == [
            HeadingToken(level=1, text="T"),
            TextToken(content="```js\nconsole.log(1)"),
        ]

    def test_bare_opening_fence_is_kept(self) -> None:
        """A lone opening fence is not dropped."""
        assert tokenize("text\n```") == [
            TextToken(content="text"),
            TextToken(content="```"),
        ]

    def test_headings_after_open_fence_stay_text(self) -> None:
        """Lines after the dangling fence are literal text, not headings."""
        tokens = tokenize("```\n# inside")
        assert tokens == [TextToken(content="```\n# inside")]


class TestTextRuns:
    """Tests for text-run normalization."""

    def test_line_endings_normalized(self) -> None:
        """CRLF and CR become LF."""
        assert tokenize("a\r\nb\rc") == [TextToken(content="a\nb\nc")]

    def test_edge_blank_lines_trimmed(self) -> None:
        """Leading and trailing blank lines are removed."""
        assert tokenize("\n\n  \nbody\n\n") == [TextToken(content="body")]

    def test_repeated_blank_lines_collapse(self) -> None:
        """Several blank lines in a row become one."""
        assert tokenize("a\n\n\n\nb") == [TextToken(content="a\n\nb")]

    def test_single_blank_line_kept(self) -> None:
        """Paragraph breaks survive."""
        assert tokenize("a\n\nb") == [TextToken(content="a\n\nb")]

    def test_blank_only_run_not_emitted(self) -> None:
        """Whitespace between headings yields no token."""
        tokens = tokenize("# A\n\n   \n# B")
        assert tokens == [HeadingToken(level=1, text="A"), HeadingToken(level=1, text="B")]

    def test_empty_input(self) -> None:
        """Empty source has no tokens."""
        assert tokenize("") == []

    def test_indentation_of_first_line_kept(self) -> None:
        """Only whole blank lines are trimmed."""
        assert normalize_text_run(["", "  indented", ""]) == "  indented"

    def test_normalization_is_idempotent(self) -> None:
        """Normalizing twice changes nothing."""
        once = normalize_text_run(["", "a", "", "", " ", "b", "", "c", ""])
        assert normalize_text_run(once.split("\n")) == once
