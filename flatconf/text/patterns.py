"""Compiled line patterns shared by the config reader and schema loader."""

from __future__ import annotations

from dataclasses import dataclass
import re

COMMENT_PATTERN = r"^\s*#"
KEY_VALUE_PATTERN = r"^\s*([A-Za-z0-9._-]+)\s*=\s*(.+?)\s*$"


@dataclass(frozen=True, slots=True)
class LinePatterns:
    """Compiled comment and `key = value` patterns.

    Build one instance at startup with `LinePatterns.compile()` and pass it to
    every classifier call.
    """

    comment: re.Pattern[str]
    key_value: re.Pattern[str]

    @classmethod
    def compile(cls) -> LinePatterns:
        """Compile the default flat-config line patterns."""

        return cls(
            comment=re.compile(COMMENT_PATTERN),
            key_value=re.compile(KEY_VALUE_PATTERN),
        )
