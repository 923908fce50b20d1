"""Config tree construction and lookup."""

from .builder import TreeBuilder, build_tree, lookup_path, split_key

__all__ = ["TreeBuilder", "build_tree", "lookup_path", "split_key"]
