"""Schema validation for built config trees.

Responsibilities:
- Check every schema key against the tree by dotted-path lookup.
- Report missing keys as warnings (or errors under the `error` policy).
- Report type mismatches as errors that fail validation.

Extra tree keys that the schema does not mention are allowed.
"""

from __future__ import annotations

from typing import Literal

from ..models.datatypes import (
    SCHEMA_TYPE_BOOL,
    ConfigMap,
    ConfigString,
    ConfigValue,
    Diagnostic,
    Schema,
    ValidationReport,
)
from ..parsing import parse_boolean_literal
from ..tree.builder import lookup_path

MissingKeyPolicy = Literal["warn", "error"]
MISSING_KEY_POLICIES: tuple[MissingKeyPolicy, ...] = ("warn", "error")


class SchemaValidator:
    """Cross-check a config tree against expected per-key types."""

    def __init__(self, missing_key_policy: MissingKeyPolicy = "warn") -> None:
        """Initialize the validator with the missing-key severity policy."""

        if missing_key_policy not in MISSING_KEY_POLICIES:
            supported = ", ".join(MISSING_KEY_POLICIES)
            raise ValueError(
                f"Unsupported missing key policy `{missing_key_policy}`; supported: {supported}."
            )
        self._missing_key_policy = missing_key_policy

    def validate(self, tree: ConfigMap, schema: Schema) -> ValidationReport:
        """Validate a tree and return diagnostics in sorted schema-key order."""

        diagnostics: list[Diagnostic] = []
        passed = True

        for key in sorted(schema):
            expected_type = schema[key]
            value = lookup_path(tree, key)
            if value is None:
                severity = "error" if self._missing_key_policy == "error" else "warning"
                diagnostics.append(
                    Diagnostic(
                        severity=severity,
                        key=key,
                        message=f"key `{key}` is missing",
                        expected_type=expected_type,
                    )
                )
                if severity == "error":
                    passed = False
                continue

            if not self._matches(value, expected_type):
                diagnostics.append(
                    Diagnostic(
                        severity="error",
                        key=key,
                        message=(
                            f"type mismatch for key `{key}`: expected `{expected_type}`, "
                            f"found `{value.type_name}`"
                        ),
                        expected_type=expected_type,
                        actual_type=value.type_name,
                    )
                )
                passed = False

        return ValidationReport(passed=passed, diagnostics=tuple(diagnostics))

    @staticmethod
    def _matches(value: ConfigValue, expected_type: str) -> bool:
        """Return whether a tree value satisfies a schema type name."""

        if value.type_name == expected_type:
            return True
        # A string holding a boolean literal still satisfies `bool`.
        if expected_type == SCHEMA_TYPE_BOOL and isinstance(value, ConfigString):
            return parse_boolean_literal(value.text) is not None
        return False
