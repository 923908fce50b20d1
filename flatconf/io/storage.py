"""JSON artifact storage for validated config trees."""

from __future__ import annotations

from pathlib import Path


class JsonArtifactStore:
    """Filesystem-backed store writing one JSON document per config file."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root output directory."""

        self.root = root

    def artifact_path(self, source: Path) -> Path:
        """Return the JSON artifact path for a source config file."""

        return self.root / f"{source.name}.json"

    def save_json_text(self, source: Path, content: str) -> Path:
        """Save rendered JSON for a source file and return the written path."""

        path = self.artifact_path(source)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content + "\n", encoding="utf-8")
        return path
