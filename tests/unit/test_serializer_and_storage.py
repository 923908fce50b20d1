"""Unit tests for JSON rendering and JSON artifact storage."""

from __future__ import annotations

import json
from pathlib import Path

from flatconf.io.serializer import render_json, to_json_payload
from flatconf.io.storage import JsonArtifactStore
from flatconf.models.datatypes import ConfigBool, ConfigMap, ConfigString
from flatconf.tree.builder import build_tree


def _sample_tree() -> ConfigMap:
    """Build a small mixed tree used across serializer tests."""

    return build_tree(
        [
            ("zeta", ConfigString("last")),
            ("alpha.enabled", ConfigBool(True)),
            ("alpha.label", ConfigString("Grüße")),
        ]
    )


def test_to_json_payload_maps_variants_to_plain_values() -> None:
    """Strings, booleans, and maps should become str, bool, and dict."""

    assert to_json_payload(_sample_tree()) == {
        "zeta": "last",
        "alpha": {"enabled": True, "label": "Grüße"},
    }


def test_render_json_is_sorted_and_round_trips() -> None:
    """Rendered JSON should be key-sorted and reparse to equivalent values."""

    rendered = render_json(_sample_tree())

    assert rendered.index('"alpha"') < rendered.index('"zeta"')
    assert '"Grüße"' in rendered
    assert json.loads(rendered) == {
        "alpha": {"enabled": True, "label": "Grüße"},
        "zeta": "last",
    }


def test_render_json_respects_indent_and_unsorted_mode() -> None:
    """Indent width and key ordering should follow arguments."""

    tree = build_tree([("b", ConfigString("1")), ("a", ConfigString("2"))])

    rendered = render_json(tree, indent=4, sort_keys=False)

    assert rendered == '{\n    "b": "1",\n    "a": "2"\n}'


def test_render_empty_tree() -> None:
    """An empty root should render as an empty JSON object."""

    assert render_json(ConfigMap()) == "{}"


def test_json_artifact_store_writes_named_artifact(tmp_path: Path) -> None:
    """Store should write `<source name>.json` under the output root."""

    store = JsonArtifactStore(tmp_path / "out")

    written = store.save_json_text(Path("configs/app.conf"), '{"a": "b"}')

    assert written == tmp_path / "out" / "app.conf.json"
    assert written.read_text(encoding="utf-8") == '{"a": "b"}\n'
