"""Config file enumeration for a file or directory target."""

from __future__ import annotations

from pathlib import Path


def collect_config_files(path: Path) -> list[Path]:
    """Return the config files to process for a path.

    A regular file is returned as-is. A directory yields every regular file
    directly inside it (non-recursive), sorted by name.

    Raises:
        FileNotFoundError: If the path is neither a file nor a directory.
    """

    if path.is_file():
        return [path]
    if path.is_dir():
        return sorted(
            (entry for entry in path.iterdir() if entry.is_file()),
            key=lambda entry: entry.name,
        )
    raise FileNotFoundError(f"Config path not found: `{path}`.")
