"""Shared pytest fixtures for the full flatconf test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from flatconf.text.patterns import LinePatterns


@pytest.fixture
def patterns() -> LinePatterns:
    """Provide freshly compiled line patterns."""

    return LinePatterns.compile()


@pytest.fixture
def write_text(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a helper writing UTF-8 text files under `tmp_path`."""

    def _write(relative_path: str, content: str) -> Path:
        """Write `content` to `relative_path` and return the created path."""

        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
