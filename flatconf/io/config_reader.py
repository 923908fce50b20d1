"""Flat config file reading.

Responsibilities:
- Run each line through classification and value coercion.
- Insert key/value lines into a fresh tree in file order.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..models.datatypes import ConfigMap, KeyValueLine
from ..parsing import coerce_value
from ..text.classifier import classify_line
from ..text.patterns import LinePatterns
from ..tree.builder import TreeBuilder


def parse_config_lines(lines: Iterable[str], patterns: LinePatterns) -> ConfigMap:
    """Build a config tree from an iterable of raw lines.

    Raises:
        TreeTypeConflictError: If a dotted key conflicts with an earlier one.
    """

    builder = TreeBuilder()
    for line in lines:
        record = classify_line(line, patterns)
        if isinstance(record, KeyValueLine):
            builder.insert(record.key, coerce_value(record.raw_value))
    return builder.root


def parse_config_text(text: str, patterns: LinePatterns) -> ConfigMap:
    """Build a config tree from config file text."""

    return parse_config_lines(text.split("\n"), patterns)


def parse_config_file(path: Path, patterns: LinePatterns, encoding: str = "utf-8") -> ConfigMap:
    """Read one config file and build its tree."""

    return parse_config_text(path.read_text(encoding=encoding), patterns)
