"""Line classification for flat `key = value` text.

Responsibilities:
- Skip blank and comment lines.
- Extract the dotted key and trimmed raw value from candidate lines.
- Treat lines that do not match the key/value pattern as skipped.
"""

from __future__ import annotations

from ..models.datatypes import KeyValueLine, LineRecord, SkipLine
from .patterns import LinePatterns

_SKIP = SkipLine()


def is_ignorable_line(line: str, patterns: LinePatterns) -> bool:
    """Return whether a line is blank or a comment."""

    trimmed = line.strip()
    return not trimmed or patterns.comment.match(trimmed) is not None


def classify_line(line: str, patterns: LinePatterns) -> LineRecord:
    """Classify one raw line as skipped or as a key/value candidate."""

    if is_ignorable_line(line, patterns):
        return _SKIP

    match = patterns.key_value.match(line.strip())
    if match is None:
        return _SKIP
    return KeyValueLine(key=match.group(1), raw_value=match.group(2).strip())
