"""JSON rendering for config trees."""

from __future__ import annotations

import json
from typing import Union

from ..models.datatypes import ConfigBool, ConfigMap, ConfigString, ConfigValue

JsonValue = Union[str, bool, dict[str, "JsonValue"]]


def to_json_payload(value: ConfigValue) -> JsonValue:
    """Convert a config value into plain JSON-compatible Python data."""

    if isinstance(value, ConfigMap):
        return {key: to_json_payload(child) for key, child in value.entries.items()}
    if isinstance(value, ConfigBool):
        return value.flag
    if isinstance(value, ConfigString):
        return value.text
    raise TypeError(f"Unsupported config value type: {type(value).__name__}")


def render_json(value: ConfigValue, *, indent: int = 2, sort_keys: bool = True) -> str:
    """Render a config value as pretty-printed JSON text."""

    return json.dumps(
        to_json_payload(value),
        ensure_ascii=False,
        indent=indent,
        sort_keys=sort_keys,
    )
