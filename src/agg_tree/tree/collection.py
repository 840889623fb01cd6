"""Top-level collection of independent aggregation trees."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from agg_tree.errors import AggIsNotInjectableError, NoPathError
from agg_tree.tree.node import is_nil_tree

if TYPE_CHECKING:
    from agg_tree.tree.node import Aggregation
    from agg_tree.tree.protocols import Sourceable

_logger = logging.getLogger(__name__)


class Aggregations(Mapping[str, "Aggregation"]):
    """Named aggregation trees without a shared parent node.

    The collection reads like a mapping; its structure only changes through
    `inject`, `inject_x` and `pop`. Unlike a node, it has nothing to descend
    through on its own, so a deep injection needs its first segment to
    already be present.

    Args:
        entries: Optional initial trees by name.

    """

    def __init__(self, entries: Mapping[str, Aggregation] | None = None) -> None:
        """Build the collection, optionally seeded from `entries`."""
        self._entries: dict[str, Aggregation] = dict(entries or {})

    def __getitem__(self, name: str) -> Aggregation:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._entries)!r})"

    def export(self) -> dict[str, Sourceable | None]:
        """Export every tree of the collection."""
        return export_all(self)

    def select(self, *path: str) -> Aggregation | None:
        """Return the tree or descendant at `path`.

        Returns:
            Aggregation | None: Resolved node, or None when any segment is missing.

        """
        if not path:
            return None

        base = self._entries.get(path[0])
        if base is None or len(path) == 1:
            return base

        return base.select(*path[1:])

    def pop(self, *path: str) -> Aggregation | None:
        """Remove and return the tree or descendant at `path`.

        Only a single-segment path removes a top-level entry; deeper paths
        are removed from the owning descendant.

        Returns:
            Aggregation | None: Removed node, or None when any segment is missing.

        """
        if not path:
            return None

        base = self._entries.get(path[0])
        if base is None:
            return None

        if len(path) == 1:
            del self._entries[path[0]]
            return base

        return base.pop(*path[1:])

    def inject(self, node: Aggregation, *path: str) -> None:
        """Insert or overwrite `node` at `path`.

        Args:
            node (Aggregation): Aggregation to attach.
            *path (str): Top-level name, then names down to the new entry.

        Raises:
            NoPathError: If `path` is empty.
            AggIsNotInjectableError: If a deeper path starts with a missing top-level name.
            PathNotSelectableError: If a deeper intermediate segment is missing.

        """
        if not path:
            raise NoPathError

        name, rest = path[0], path[1:]
        if not rest:
            self._entries[name] = node
            return

        self._require_entry(name, path).inject(node, *rest)

    def inject_x(self, node: Aggregation, *path: str) -> None:
        """Insert `node` at `path` unless a node is already there.

        Raises:
            NoPathError: If `path` is empty.
            AggIsNotInjectableError: If a deeper path starts with a missing top-level name.
            PathNotSelectableError: If a deeper intermediate segment is missing.

        """
        if not path:
            raise NoPathError

        name, rest = path[0], path[1:]
        if not rest:
            if is_nil_tree(self._entries.get(name)):
                self._entries[name] = node
            return

        self._require_entry(name, path).inject_x(node, *rest)

    def _require_entry(self, name: str, path: tuple[str, ...]) -> Aggregation:
        base = self._entries.get(name)
        if base is None or is_nil_tree(base):
            _logger.debug("Refusing inject at '%s': '%s' is not in the collection.", "/".join(path), name)
            raise AggIsNotInjectableError(path)
        return base


def export_all(collection: Aggregations | None) -> dict[str, Sourceable | None]:
    """Export each tree of a possibly absent collection.

    Args:
        collection (Aggregations | None): Collection to export.

    Returns:
        dict[str, Sourceable | None]: Exported trees by name, empty when `collection` is None.

    """
    if collection is None:
        return {}

    return {name: node.export() for name, node in collection.items()}


def _require_collection(collection: Aggregations | None, path: tuple[str, ...]) -> Aggregations:
    if collection is None:
        _logger.debug("Refusing inject at '%s': no collection.", "/".join(path))
        raise AggIsNotInjectableError(path)
    return collection


def inject_into(collection: Aggregations | None, node: Aggregation, *path: str) -> None:
    """Insert or overwrite `node` at `path` in a possibly absent collection.

    Raises:
        AggIsNotInjectableError: If `collection` is None; otherwise as `Aggregations.inject`.

    """
    _require_collection(collection, path).inject(node, *path)


def inject_into_x(collection: Aggregations | None, node: Aggregation, *path: str) -> None:
    """Insert `node` at `path` in a possibly absent collection unless already present.

    Raises:
        AggIsNotInjectableError: If `collection` is None; otherwise as `Aggregations.inject_x`.

    """
    _require_collection(collection, path).inject_x(node, *path)
