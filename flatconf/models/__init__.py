"""Shared typed data models for flatconf.

This package contains dataclasses used across parsing, validation, and CLI
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    SCHEMA_TYPE_BOOL,
    SCHEMA_TYPE_MAP,
    SCHEMA_TYPE_STRING,
    ConfigBool,
    ConfigMap,
    ConfigString,
    ConfigValue,
    Diagnostic,
    FileResult,
    KeyValueLine,
    LineRecord,
    Schema,
    SkipLine,
    ValidationReport,
)

__all__ = [
    "SCHEMA_TYPE_BOOL",
    "SCHEMA_TYPE_MAP",
    "SCHEMA_TYPE_STRING",
    "ConfigBool",
    "ConfigMap",
    "ConfigString",
    "ConfigValue",
    "Diagnostic",
    "FileResult",
    "KeyValueLine",
    "LineRecord",
    "Schema",
    "SkipLine",
    "ValidationReport",
]
