"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for stage failures,
per-file headers, validation diagnostics, and JSON output.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .errors import StageError
from .models.datatypes import FileResult, ValidationReport

USAGE_LINE = "Usage: flatconf <schema-file> <config-file-or-directory>"


def exit_with_usage_error() -> NoReturn:
    """Print the usage line to stderr and exit with code 1."""

    typer.secho(USAGE_LINE, err=True)
    raise typer.Exit(code=1)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, StageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_file_header(path: Path) -> None:
    """Print the delimiter line naming a processed config file."""

    typer.echo(f"=== File: {path} ===")


def echo_diagnostics(report: ValidationReport) -> None:
    """Print validation warnings and errors to stderr in report order."""

    for diagnostic in report.diagnostics:
        if diagnostic.severity == "warning":
            typer.secho(f"Warning: {diagnostic.message}", fg=typer.colors.YELLOW, err=True)
        else:
            typer.secho(f"Error: {diagnostic.message}", fg=typer.colors.RED, err=True)


def echo_file_result(result: FileResult, rendered_json: str | None) -> None:
    """Print the JSON tree or a failure line for one processed file."""

    if result.report is not None:
        echo_diagnostics(result.report)

    if result.status == "error":
        typer.secho(
            f"Error: {result.error} ({result.path})",
            fg=typer.colors.RED,
            err=True,
        )
        return
    if result.status == "invalid":
        typer.secho(
            f"Error: validation failed for config file: {result.path}",
            fg=typer.colors.RED,
            err=True,
        )
        return

    if rendered_json is not None:
        typer.echo(rendered_json)
    if result.output_path is not None:
        typer.echo(f"JSON artifact: {result.output_path}", err=True)


def echo_run_summary(results: list[FileResult]) -> None:
    """Print a one-line per-run outcome summary to stderr."""

    valid = sum(1 for result in results if result.status == "valid")
    invalid = sum(1 for result in results if result.status == "invalid")
    errors = sum(1 for result in results if result.status == "error")
    typer.echo(
        f"Files: {len(results)} valid={valid} invalid={invalid} errors={errors}",
        err=True,
    )
