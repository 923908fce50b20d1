"""Unit tests for flat config line classification."""

from __future__ import annotations

import pytest

from flatconf.models.datatypes import KeyValueLine, SkipLine
from flatconf.text.classifier import classify_line
from flatconf.text.patterns import LinePatterns


@pytest.mark.parametrize(
    "line",
    ["", "   ", "\t", "# comment", "   # indented comment", "#key = value"],
)
def test_blank_and_comment_lines_are_skipped(line: str, patterns: LinePatterns) -> None:
    """Blank, whitespace-only, and `#` lines should classify as skipped."""

    assert classify_line(line, patterns) == SkipLine()


@pytest.mark.parametrize(
    "line",
    ["no separator here", "= value", "key =", "key with space = value", "k@y = value"],
)
def test_unmatched_lines_are_silently_skipped(line: str, patterns: LinePatterns) -> None:
    """Lines that do not match the key/value pattern should be ignored."""

    assert classify_line(line, patterns) == SkipLine()


def test_key_value_line_extracts_dotted_key_and_trimmed_value(patterns: LinePatterns) -> None:
    """Classifier should keep the dotted key unsplit and trim the value."""

    record = classify_line("  server.http-port_v2 =   8080   ", patterns)

    assert record == KeyValueLine(key="server.http-port_v2", raw_value="8080")


def test_value_keeps_inner_whitespace_and_equals_signs(patterns: LinePatterns) -> None:
    """Values are free text up to end of line, including `=` and `#`."""

    record = classify_line("greeting=hello = world # not a comment", patterns)

    assert record == KeyValueLine(key="greeting", raw_value="hello = world # not a comment")


def test_separator_without_surrounding_spaces_is_accepted(patterns: LinePatterns) -> None:
    """Whitespace around `=` should be optional."""

    assert classify_line("a.b=c", patterns) == KeyValueLine(key="a.b", raw_value="c")
