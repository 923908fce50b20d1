"""Nested tree reconstruction from dotted keys.

Responsibilities:
- Accumulate `(dotted_key, value)` pairs into one root `ConfigMap`.
- Reject keys that reuse a path as both a leaf and a container.
- Resolve dotted paths against a built tree.

Key types:
- `TreeBuilder`: owning accumulator for one file's tree.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import TreeTypeConflictError
from ..models.datatypes import ConfigMap, ConfigValue

KEY_SEPARATOR = "."


def split_key(dotted_key: str) -> list[str]:
    """Split a dotted key into ordered path segments."""

    return dotted_key.split(KEY_SEPARATOR)


class TreeBuilder:
    """Build one nested config tree with last-write-wins leaf semantics."""

    def __init__(self) -> None:
        """Initialize an empty root container."""

        self._root = ConfigMap()

    @property
    def root(self) -> ConfigMap:
        """Return the root container built so far."""

        return self._root

    def insert(self, dotted_key: str, value: ConfigValue) -> None:
        """Install a value at a dotted path, creating intermediate containers.

        Raises:
            TreeTypeConflictError: If an intermediate segment already holds a
                leaf, or the final segment already holds a container.
        """

        segments = split_key(dotted_key)
        entries = self._root.as_map()

        for depth, segment in enumerate(segments[:-1]):
            child = entries.get(segment)
            if child is None:
                child = ConfigMap()
                entries[segment] = child
            child_entries = child.as_map()
            if child_entries is None:
                raise TreeTypeConflictError(
                    key=dotted_key,
                    segment_path=KEY_SEPARATOR.join(segments[: depth + 1]),
                    existing_type=child.type_name,
                )
            entries = child_entries

        leaf_segment = segments[-1]
        existing = entries.get(leaf_segment)
        if existing is not None and existing.as_map() is not None and value.as_map() is None:
            raise TreeTypeConflictError(
                key=dotted_key,
                segment_path=dotted_key,
                existing_type=existing.type_name,
            )
        entries[leaf_segment] = value


def build_tree(pairs: Iterable[tuple[str, ConfigValue]]) -> ConfigMap:
    """Fold `(dotted_key, value)` pairs into a fresh root container."""

    builder = TreeBuilder()
    for key, value in pairs:
        builder.insert(key, value)
    return builder.root


def lookup_path(root: ConfigMap, dotted_key: str) -> ConfigValue | None:
    """Resolve a dotted key against a tree and return `None` when absent."""

    current: ConfigValue = root
    for segment in split_key(dotted_key):
        entries = current.as_map()
        if entries is None or segment not in entries:
            return None
        current = entries[segment]
    return current
