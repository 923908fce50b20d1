"""Command-line interface for flatconf.

Responsibilities:
- Expose the `flatconf <schema> <config-path>` validation command.
- Convert CLI options into `FlatconfSettings` and drive the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .cli_rendering import (
    echo_file_header,
    echo_file_result,
    echo_run_summary,
    exit_with_command_error,
    exit_with_usage_error,
)
from .config import FlatconfSettings, SettingsLoader
from .errors import StageError
from .models.datatypes import FileResult
from .pipeline import FlatconfPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="flatconf",
    add_completion=False,
    help="Validate flat `key = value` config files against a schema and print them as JSON.",
)


def _version_callback(value: bool) -> None:
    """Print the package version and exit when `--version` is passed."""

    if value:
        typer.echo(f"flatconf {__version__}")
        raise typer.Exit()


def _resolve_settings(
    settings_file: Path | None,
    strict: bool | None,
    sort_keys: bool | None,
    indent: int | None,
    out: Path | None,
) -> FlatconfSettings:
    """Resolve effective settings from settings file, environment, and CLI overrides."""

    try:
        loaded = SettingsLoader.resolve(settings_file)
        return loaded.with_overrides(
            strict=strict,
            sort_keys=sort_keys,
            indent=indent,
            output_dir=out,
        )
    except FileNotFoundError as exc:
        raise StageError(
            stage="settings",
            detail=f"Settings file not found: `{settings_file}`.",
            hint="Provide an existing path via `--settings <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise StageError(
            stage="settings",
            detail=f"Invalid settings: {exc}",
            hint="Fix settings values in the YAML file or `FLATCONF_*` environment variables.",
        ) from exc


@app.command()
def validate_command(
    schema_file: Annotated[
        Path | None,
        typer.Argument(help="Schema file with `dotted.key = string|bool` declarations."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Argument(help="Config file, or directory whose files are validated (non-recursive)."),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Treat keys declared in the schema but missing from a config file as errors.",
        ),
    ] = None,
    settings_file: Annotated[
        Path | None,
        typer.Option("--settings", help="Path to YAML file with run settings."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Also write `<file>.json` for every valid config file here."),
    ] = None,
    indent: Annotated[
        int | None,
        typer.Option("--indent", help="JSON indentation width (overrides settings)."),
    ] = None,
    sort_keys: Annotated[
        bool | None,
        typer.Option("--sort-keys/--no-sort-keys", help="Sort JSON object keys."),
    ] = None,
    log_events: Annotated[
        bool,
        typer.Option("--log-events", help="Emit structured phase logs to stderr."),
    ] = False,
    summary: Annotated[
        bool,
        typer.Option("--summary", help="Print a per-run outcome summary to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the flatconf version and exit.",
        ),
    ] = False,
) -> None:
    """Validate config files against a schema and print each valid tree as JSON."""

    _ = version
    if schema_file is None or config_path is None:
        exit_with_usage_error()

    try:
        settings = _resolve_settings(settings_file, strict, sort_keys, indent, out)
        pipeline = FlatconfPipeline(
            settings=settings,
            run_logger=RunLogger() if log_events else None,
        )
        schema = pipeline.load_schema(schema_file)
        files = pipeline.collect(config_path)
    except Exception as exc:
        exit_with_command_error("flatconf", exc)

    results: list[FileResult] = []
    for path in files:
        echo_file_header(path)
        result = pipeline.process_file(path, schema)
        rendered = pipeline.render(result.tree) if result.ok and result.tree is not None else None
        echo_file_result(result, rendered)
        results.append(result)

    if summary:
        echo_run_summary(results)
    if not all(result.ok for result in results):
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
