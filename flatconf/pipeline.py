"""Validation run orchestration for flatconf.

Responsibilities:
- Load the schema once per run and enumerate config files.
- Parse, validate, and serialize each file independently.
- Map per-file failures into `FileResult` records instead of aborting the run.

Key public class:
- `FlatconfPipeline`: orchestrates one schema against a file or directory.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .config import FlatconfSettings
from .errors import SchemaParseError, StageError, TreeTypeConflictError
from .io.collector import collect_config_files
from .io.config_reader import parse_config_file
from .io.serializer import render_json
from .io.storage import JsonArtifactStore
from .models.datatypes import ConfigMap, FileResult, Schema
from .schema.loader import SchemaLoader
from .schema.validator import SchemaValidator
from .telemetry.logger import RunLogger
from .text.patterns import LinePatterns


class FlatconfPipeline:
    """Run schema loading, config parsing, validation, and JSON rendering."""

    def __init__(
        self,
        settings: FlatconfSettings | None = None,
        run_logger: RunLogger | None = None,
        patterns: LinePatterns | None = None,
    ) -> None:
        """Initialize pipeline collaborators from run settings."""

        self.settings = settings or FlatconfSettings()
        self._run_logger = run_logger
        self._patterns = patterns or LinePatterns.compile()
        self._schema_loader = SchemaLoader(self._patterns, encoding=self.settings.encoding)
        self._validator = SchemaValidator(self.settings.missing_key_policy)
        self._store = (
            JsonArtifactStore(self.settings.output_dir)
            if self.settings.output_dir is not None
            else None
        )

    def load_schema(self, schema_path: Path) -> Schema:
        """Load the run schema and map failures to stage errors."""

        self._log_start("schema", path=schema_path)
        try:
            schema = self._schema_loader.load(schema_path)
        except FileNotFoundError as exc:
            self._log_failure("schema", exc)
            raise StageError(
                stage="schema",
                detail=f"Schema file not found: `{schema_path}`.",
                hint="Pass an existing schema file as the first argument.",
            ) from exc
        except SchemaParseError as exc:
            self._log_failure("schema", exc)
            raise StageError(
                stage="schema",
                detail=f"Invalid schema: {exc}",
                hint="Declare each key as `dotted.key = string` or `dotted.key = bool`.",
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            self._log_failure("schema", exc)
            raise StageError(
                stage="schema",
                detail=f"Failed to read schema file `{schema_path}`: {exc}",
                hint="Verify file permissions and encoding.",
            ) from exc
        self._log_complete("schema", keys=len(schema))
        return schema

    def collect(self, config_path: Path) -> list[Path]:
        """Enumerate config files and map failures to stage errors."""

        self._log_start("collect", path=config_path)
        try:
            files = collect_config_files(config_path)
        except OSError as exc:
            self._log_failure("collect", exc)
            raise StageError(
                stage="collect",
                detail=f"Failed to collect config files from `{config_path}`: {exc}",
                hint="Pass an existing config file or directory as the second argument.",
            ) from exc
        self._log_complete("collect", files=len(files))
        return files

    def process_file(self, path: Path, schema: Schema) -> FileResult:
        """Parse, validate, and optionally persist one config file."""

        self._log_start("parse", path=path)
        try:
            tree = parse_config_file(path, self._patterns, encoding=self.settings.encoding)
        except (OSError, UnicodeDecodeError, TreeTypeConflictError) as exc:
            self._log_failure("parse", exc, path=path)
            return FileResult(
                path=path, status="error", error=f"failed to read config file: {exc}"
            )
        self._log_complete("parse", path=path)

        self._log_start("validate", path=path)
        report = self._validator.validate(tree, schema)
        for diagnostic in report.warnings:
            self._log_warning("validate", path=path, key=diagnostic.key)
        if not report.passed:
            self._log_failure("validate", None, path=path, errors=len(report.errors))
            return FileResult(path=path, status="invalid", tree=tree, report=report)
        self._log_complete("validate", path=path)

        output_path = None
        if self._store is not None:
            self._log_start("serialize", path=path)
            try:
                output_path = self._store.save_json_text(path, self.render(tree))
            except OSError as exc:
                self._log_failure("serialize", exc, path=path)
                return FileResult(
                    path=path,
                    status="error",
                    tree=tree,
                    report=report,
                    error=(
                        "failed to write JSON artifact "
                        f"`{self._store.artifact_path(path)}`: {exc}"
                    ),
                )
            self._log_complete("serialize", path=path, output=output_path)

        return FileResult(
            path=path,
            status="valid",
            tree=tree,
            report=report,
            output_path=output_path,
        )

    def run(self, schema_path: Path, config_path: Path) -> Iterator[FileResult]:
        """Yield per-file results in enumeration order.

        Schema and collection failures raise `StageError` before any result is
        yielded.
        """

        schema = self.load_schema(schema_path)
        files = self.collect(config_path)
        for path in files:
            yield self.process_file(path, schema)

    def render(self, tree: ConfigMap) -> str:
        """Render a tree using the run's JSON settings."""

        return render_json(tree, indent=self.settings.indent, sort_keys=self.settings.sort_keys)

    def _log_start(self, stage: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage, **context)

    def _log_complete(self, stage: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage, **context)

    def _log_warning(self, stage: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_warning(stage, **context)

    def _log_failure(self, stage: str, exc: Exception | None, **context: object) -> None:
        if self._run_logger is not None:
            error_type = type(exc).__name__ if exc is not None else "ValidationMismatch"
            self._run_logger.log_stage_failure(stage, error_type, **context)
