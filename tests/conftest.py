"""Test setup for mdsplit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    package_logger = logging.getLogger("mdsplit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def example_markdown() -> str:
    """Two heading levels with a fenced block in the middle section."""
    return "# A\nx\n## B\n```js\n1\n```\n## C\ny"
