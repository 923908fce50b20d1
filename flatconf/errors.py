"""Domain exceptions for flatconf parsing, schema, and CLI diagnostics."""

from __future__ import annotations


class StageError(RuntimeError):
    """Raised when a specific run stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped run error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class SchemaParseError(ValueError):
    """Raised when a schema declaration line cannot be parsed."""

    def __init__(self, *, source: str, line_number: int, line: str, reason: str) -> None:
        """Initialize with the offending line location and content."""

        super().__init__(
            f"{source} line {line_number}: {reason}: `{line.strip()}`"
        )
        self.source = source
        self.line_number = line_number
        self.line = line
        self.reason = reason


class TreeTypeConflictError(ValueError):
    """Raised when a dotted key reuses a path as both a leaf and a container."""

    def __init__(self, *, key: str, segment_path: str, existing_type: str) -> None:
        """Initialize with the inserted key and the conflicting path prefix."""

        super().__init__(
            f"type conflict for key `{key}`: `{segment_path}` is already a {existing_type}"
        )
        self.key = key
        self.segment_path = segment_path
        self.existing_type = existing_type
