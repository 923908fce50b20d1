"""Schema declaration loading.

Responsibilities:
- Read `key = type` declarations into a flat dotted-key schema mapping.
- Skip blank and comment lines the same way config files do.
- Fail the whole load on the first malformed declaration.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import SchemaParseError
from ..models.datatypes import SCHEMA_TYPE_BOOL, SCHEMA_TYPE_STRING, Schema
from ..text.classifier import is_ignorable_line
from ..text.patterns import LinePatterns

DECLARABLE_TYPES = frozenset({SCHEMA_TYPE_STRING, SCHEMA_TYPE_BOOL})


class SchemaLoader:
    """Parse schema files written as `dotted.key = string|bool` lines."""

    def __init__(self, patterns: LinePatterns, encoding: str = "utf-8") -> None:
        """Initialize the loader with shared compiled line patterns."""

        self._patterns = patterns
        self._encoding = encoding

    def load(self, path: Path) -> Schema:
        """Read and parse a schema file.

        Raises:
            FileNotFoundError: If the schema file does not exist.
            SchemaParseError: If any declaration line is malformed.
        """

        text = path.read_text(encoding=self._encoding)
        return self.parse_text(text, source=f"schema `{path}`")

    def parse_text(self, text: str, source: str = "schema") -> Schema:
        """Parse schema text into a dotted-key to type-name mapping."""

        schema: Schema = {}
        for line_number, line in enumerate(text.split("\n"), start=1):
            if is_ignorable_line(line, self._patterns):
                continue

            match = self._patterns.key_value.match(line.strip())
            if match is None:
                raise SchemaParseError(
                    source=source,
                    line_number=line_number,
                    line=line,
                    reason="expected `key = type` declaration",
                )

            type_token = match.group(2).strip().lower()
            if type_token not in DECLARABLE_TYPES:
                supported = ", ".join(sorted(DECLARABLE_TYPES))
                raise SchemaParseError(
                    source=source,
                    line_number=line_number,
                    line=line,
                    reason=f"unsupported type `{match.group(2).strip()}` (supported: {supported})",
                )
            schema[match.group(1)] = type_token
        return schema
