"""Top-level package for flatconf.

This package parses flat `key = value` configuration files with dotted keys
into nested typed trees, validates them against a per-key type schema, and
renders them as JSON. The main orchestration entry point is
`FlatconfPipeline`.
"""

__version__ = "0.1.0"

from .pipeline import FlatconfPipeline

__all__ = ["FlatconfPipeline", "__version__"]
