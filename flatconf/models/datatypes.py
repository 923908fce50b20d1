"""Core datatypes shared across flatconf modules.

Responsibilities:
- Represent the typed configuration tree built from flat text files.
- Represent classified lines, validation diagnostics, and per-file outcomes.

Key types:
- `ConfigString`, `ConfigBool`, `ConfigMap` (the `ConfigValue` union),
  `SkipLine`, `KeyValueLine`, `Diagnostic`, `ValidationReport`, and `FileResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Literal, Union

SCHEMA_TYPE_STRING = "string"
SCHEMA_TYPE_BOOL = "bool"
SCHEMA_TYPE_MAP = "map"

Schema = dict[str, str]


@dataclass(frozen=True, slots=True)
class ConfigString:
    """Leaf scalar holding raw value text.

    Attributes:
        text: Value text exactly as read (already trimmed by the classifier).
    """

    text: str
    type_name: ClassVar[str] = SCHEMA_TYPE_STRING

    def as_map(self) -> None:
        """Leaves never expose container entries."""

        return None


@dataclass(frozen=True, slots=True)
class ConfigBool:
    """Leaf scalar holding a boolean flag."""

    flag: bool
    type_name: ClassVar[str] = SCHEMA_TYPE_BOOL

    def as_map(self) -> None:
        """Leaves never expose container entries."""

        return None


@dataclass(slots=True)
class ConfigMap:
    """Container node mapping single path segments to child values.

    Attributes:
        entries: Child values keyed by segment name (never containing `.`).
    """

    entries: dict[str, "ConfigValue"] = field(default_factory=dict)
    type_name: ClassVar[str] = SCHEMA_TYPE_MAP

    def as_map(self) -> dict[str, "ConfigValue"]:
        """Return the mutable child mapping of this container."""

        return self.entries


ConfigValue = Union[ConfigString, ConfigBool, ConfigMap]


@dataclass(frozen=True, slots=True)
class SkipLine:
    """Classifier result for blank, comment, or unmatched lines."""


@dataclass(frozen=True, slots=True)
class KeyValueLine:
    """Classifier result for a `key = value` line.

    Attributes:
        key: Dotted key, not yet split into segments.
        raw_value: Value text with surrounding whitespace trimmed.
    """

    key: str
    raw_value: str


LineRecord = Union[SkipLine, KeyValueLine]

Severity = Literal["warning", "error"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One per-key validation message.

    Attributes:
        severity: `warning` for non-fatal findings, `error` for failures.
        key: Fully-qualified dotted schema key.
        message: Human-readable description.
        expected_type: Schema type name declared for the key.
        actual_type: Type name found in the tree, or `None` when missing.
    """

    severity: Severity
    key: str
    message: str
    expected_type: str
    actual_type: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of validating one tree against a schema."""

    passed: bool
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Return warning diagnostics in report order."""

        return tuple(item for item in self.diagnostics if item.severity == "warning")

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Return error diagnostics in report order."""

        return tuple(item for item in self.diagnostics if item.severity == "error")


FileStatus = Literal["valid", "invalid", "error"]


@dataclass(frozen=True, slots=True)
class FileResult:
    """Processing outcome for one config file.

    Attributes:
        path: Config file path as enumerated by the collector.
        status: `valid`, `invalid` (validation failed), or `error` (read/parse failed).
        tree: Built root container, when parsing succeeded.
        report: Validation report, when validation ran.
        error: Failure detail for `error` results.
        output_path: JSON artifact path when one was written.
    """

    path: Path
    status: FileStatus
    tree: ConfigMap | None = None
    report: ValidationReport | None = None
    error: str | None = None
    output_path: Path | None = None

    @property
    def ok(self) -> bool:
        """Return whether the file parsed and validated successfully."""

        return self.status == "valid"
