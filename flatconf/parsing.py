"""Shared parsing helpers for config values and runtime settings normalization."""

from __future__ import annotations

from .models.datatypes import ConfigBool, ConfigString, ConfigValue

_TRUE_LITERAL = "true"
_FALSE_LITERAL = "false"

_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def parse_boolean_literal(text: str) -> bool | None:
    """Match `true`/`false` case-insensitively and return `None` for anything else.

    Only these two literals count as booleans inside config files; `yes`, `1`,
    and similar tokens stay strings.
    """

    token = text.lower()
    if token == _TRUE_LITERAL:
        return True
    if token == _FALSE_LITERAL:
        return False
    return None


def coerce_value(raw_value: str) -> ConfigValue:
    """Convert trimmed raw value text into a typed config leaf.

    Args:
        raw_value: Value text captured by the line classifier.

    Returns:
        `ConfigBool` for boolean literals, otherwise `ConfigString` holding the
        text verbatim.
    """

    parsed = parse_boolean_literal(raw_value)
    if parsed is not None:
        return ConfigBool(parsed)
    return ConfigString(raw_value)


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive settings boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None
