"""Integration tests for the `flatconf` validation command."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from flatconf import __version__
from flatconf.cli import app

_SCHEMA = """
# expected keys
name = string
active = bool
server.host = string
""".lstrip()


def _write(path: Path, content: str) -> Path:
    """Write UTF-8 text, creating parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _json_after_header(output: str) -> object:
    """Parse the JSON document printed after the file header line."""

    header, _, body = output.partition("\n")
    assert header.startswith("=== File: ")
    return json.loads(body)


def test_valid_file_prints_header_and_sorted_json(tmp_path: Path) -> None:
    """A valid config should print its header and pretty JSON with exit code 0."""

    schema_path = _write(tmp_path / "app.schema", _SCHEMA)
    config_path = _write(
        tmp_path / "app.conf",
        "name = Alice\nactive = True\nserver.host = example.org\nserver.tls = false\n",
    )

    result = CliRunner().invoke(app, [str(schema_path), str(config_path)])

    assert result.exit_code == 0
    assert result.output.startswith(f"=== File: {config_path} ===\n")
    assert _json_after_header(result.output) == {
        "active": True,
        "name": "Alice",
        "server": {"host": "example.org", "tls": False},
    }
    assert '{\n  "active": true,' in result.output


def test_directory_target_processes_every_file_independently(tmp_path: Path) -> None:
    """Each file in a directory should get its own header and outcome."""

    schema_path = _write(tmp_path / "app.schema", _SCHEMA)
    configs = tmp_path / "configs"
    good = _write(configs / "a.conf", "name = Alice\nactive = false\nserver.host = h\n")
    bad = _write(configs / "b.conf", "name = Bob\nactive = yes\nserver.host = h\n")
    conflict = _write(configs / "c.conf", "server = plain\nserver.host = h\n")
    _write(configs / "nested" / "ignored.conf", "name = ignored\n")

    result = CliRunner().invoke(app, [str(schema_path), str(configs)])

    assert result.exit_code == 1
    output = result.output
    assert output.index(f"=== File: {good} ===") < output.index(f"=== File: {bad} ===")
    assert output.index(f"=== File: {bad} ===") < output.index(f"=== File: {conflict} ===")
    assert "ignored.conf" not in output
    assert '"name": "Alice"' in output
    assert '"name": "Bob"' not in output
    assert "Error: type mismatch for key `active`: expected `bool`, found `string`" in output
    assert f"Error: validation failed for config file: {bad}" in output
    assert "Error: failed to read config file: type conflict for key `server.host`" in output


def test_missing_key_warns_but_file_still_passes(tmp_path: Path) -> None:
    """Missing schema keys should warn and still print JSON by default."""

    schema_path = _write(tmp_path / "app.schema", "name = string\nmissing.key = string\n")
    config_path = _write(tmp_path / "app.conf", "name = Alice\n")

    result = CliRunner().invoke(app, [str(schema_path), str(config_path)])

    assert result.exit_code == 0
    assert "Warning: key `missing.key` is missing" in result.output
    assert '"name": "Alice"' in result.output


def test_strict_flag_fails_files_with_missing_keys(tmp_path: Path) -> None:
    """`--strict` should turn missing keys into validation failures."""

    schema_path = _write(tmp_path / "app.schema", "name = string\nmissing.key = string\n")
    config_path = _write(tmp_path / "app.conf", "name = Alice\n")

    result = CliRunner().invoke(app, [str(schema_path), str(config_path), "--strict"])

    assert result.exit_code == 1
    assert "Error: key `missing.key` is missing" in result.output
    assert f"Error: validation failed for config file: {config_path}" in result.output
    assert '"name"' not in result.output


def test_settings_file_and_cli_overrides(tmp_path: Path) -> None:
    """Settings file values should apply unless overridden on the command line."""

    schema_path = _write(tmp_path / "app.schema", "missing.key = string\n")
    config_path = _write(tmp_path / "app.conf", "b = 1\na = 2\n")
    settings_path = _write(
        tmp_path / "flatconf.yml", "missing_key_policy: error\nsort_keys: false\nindent: 4\n"
    )

    strict_result = CliRunner().invoke(
        app, [str(schema_path), str(config_path), "--settings", str(settings_path)]
    )
    relaxed_result = CliRunner().invoke(
        app,
        [str(schema_path), str(config_path), "--settings", str(settings_path), "--no-strict"],
    )

    assert strict_result.exit_code == 1
    assert relaxed_result.exit_code == 0
    assert '{\n    "b": "1",\n    "a": "2"\n}' in relaxed_result.output


def test_out_option_writes_json_artifacts(tmp_path: Path) -> None:
    """`--out` should persist one JSON artifact per valid config file."""

    schema_path = _write(tmp_path / "app.schema", "name = string\n")
    config_path = _write(tmp_path / "app.conf", "name = Alice\n")
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(
        app, [str(schema_path), str(config_path), "--out", str(out_dir)]
    )

    assert result.exit_code == 0
    artifact = out_dir / "app.conf.json"
    assert json.loads(artifact.read_text(encoding="utf-8")) == {"name": "Alice"}
    assert f"JSON artifact: {artifact}" in result.output


def test_unwritable_out_target_fails_each_file_and_keeps_going(tmp_path: Path) -> None:
    """An `--out` path that is not a directory should fail files, not the process."""

    schema_path = _write(tmp_path / "app.schema", "name = string\n")
    _write(tmp_path / "configs" / "a.conf", "name = Alice\n")
    _write(tmp_path / "configs" / "b.conf", "name = Bob\n")
    out_file = _write(tmp_path / "out", "not a directory\n")

    result = CliRunner().invoke(
        app, [str(schema_path), str(tmp_path / "configs"), "--out", str(out_file), "--summary"]
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert f"=== File: {tmp_path / 'configs' / 'a.conf'} ===" in result.output
    assert f"=== File: {tmp_path / 'configs' / 'b.conf'} ===" in result.output
    assert result.output.count("Error: failed to write JSON artifact") == 2
    assert "Files: 2 valid=0 invalid=0 errors=2" in result.output


def test_log_events_and_summary_go_to_stderr_stream(tmp_path: Path) -> None:
    """Phase logs and the run summary should be emitted when requested."""

    schema_path = _write(tmp_path / "app.schema", "name = string\n")
    config_path = _write(tmp_path / "app.conf", "name = Alice\n")

    result = CliRunner().invoke(
        app, [str(schema_path), str(config_path), "--log-events", "--summary"]
    )

    assert result.exit_code == 0
    assert "[phase] level=INFO stage=schema event=complete keys=1" in result.output
    assert "Files: 1 valid=1 invalid=0 errors=0" in result.output


def test_version_option_prints_package_version() -> None:
    """`--version` should print the version and exit cleanly."""

    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"flatconf {__version__}" in result.output
