"""Input/output components for flatconf.

This package contains config file enumeration and reading, JSON rendering,
and artifact storage used by the pipeline.
"""

from .collector import collect_config_files
from .config_reader import parse_config_file, parse_config_text
from .serializer import render_json, to_json_payload
from .storage import JsonArtifactStore

__all__ = [
    "JsonArtifactStore",
    "collect_config_files",
    "parse_config_file",
    "parse_config_text",
    "render_json",
    "to_json_payload",
]
