"""Path-addressable aggregation nodes.

Every aggregation owns a `Tree` adapter that maps child names to child
aggregations and knows how to descend through them by path. Concrete
aggregation kinds only describe their own options; navigation, injection
and removal are shared.

Trees are plain mutable structures without locking: callers that share a
tree between threads must serialize structural mutation themselves.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

from agg_tree.errors import AggIsNotInjectableError, NoPathError, PathNotSelectableError

if TYPE_CHECKING:
    from agg_tree.domain import AggregationKind
    from agg_tree.tree.protocols import Sourceable

_AGGREGATIONS_KEY = "aggregations"
_META_KEY = "meta"
_logger = logging.getLogger(__name__)


class Aggregation(ABC):
    """Represent one aggregation node of an addressable tree."""

    @abstractmethod
    def source(self) -> Any:
        """Render the aggregation body, sub-aggregations included."""

    @abstractmethod
    def get_all_subs(self) -> dict[str, Aggregation]:
        """Return the live mapping of direct sub-aggregations."""

    @abstractmethod
    def inject(self, node: Aggregation, *path: str) -> None:
        """Set `node` at `path`, overwriting any existing entry."""

    @abstractmethod
    def inject_x(self, node: Aggregation, *path: str) -> None:
        """Set `node` at `path` only when nothing is there yet."""

    @abstractmethod
    def select(self, *path: str) -> Aggregation | None:
        """Return the descendant at `path`, or None."""

    @abstractmethod
    def pop(self, *path: str) -> Aggregation | None:
        """Remove and return the descendant at `path`, or None."""

    @abstractmethod
    def export(self) -> Sourceable | None:
        """Return the plain representation of this node."""


def is_nil_tree(node: Aggregation | None) -> bool:
    """Tell whether `node` is absent or wraps nothing exportable.

    Args:
        node (Aggregation | None): Resolved node, possibly missing.

    Returns:
        bool: True when the node must be treated as not found.

    """
    return node is None or node.export() is None


class Tree:
    """Child storage and path navigation shared by every aggregation.

    Args:
        root: Object answered by `export()`. Bound once, never reassigned.

    """

    __slots__ = ("_children", "_root")

    def __init__(self, root: Sourceable | None) -> None:
        """Bind the adapter to its owner with an empty child mapping."""
        self._root = root
        self._children: dict[str, Aggregation] = {}

    @property
    def root(self) -> Sourceable | None:
        """Return the owner this adapter was built for."""
        return self._root

    def get_all_subs(self) -> dict[str, Aggregation]:
        """Return the live child mapping.

        Returns:
            dict[str, Aggregation]: Direct children by name, not a copy.

        """
        return self._children

    def inject(self, node: Aggregation, *path: str) -> None:
        """Insert or overwrite `node` at `path`.

        Intermediate nodes are never created: every segment but the last
        must already resolve to a present node.

        Args:
            node (Aggregation): Aggregation to attach.
            *path (str): Names from this node down to the new entry.

        Raises:
            NoPathError: If `path` is empty.
            PathNotSelectableError: If an intermediate segment is missing.

        """
        if not path:
            raise NoPathError

        if len(path) == 1:
            self._children[path[0]] = node
            return

        parent_path = path[:-1]
        cursor = self.select(*parent_path)
        if is_nil_tree(cursor):
            _logger.debug("Refusing inject at '%s': parent is not selectable.", "/".join(path))
            raise PathNotSelectableError(parent_path)

        cursor.inject(node, path[-1])

    def inject_x(self, node: Aggregation, *path: str) -> None:
        """Insert `node` at `path` unless a node is already present there.

        Args:
            node (Aggregation): Aggregation to attach.
            *path (str): Names from this node down to the new entry.

        Raises:
            NoPathError: If `path` is empty.
            PathNotSelectableError: If an intermediate segment is missing.

        """
        if not path:
            raise NoPathError

        if is_nil_tree(self.select(*path)):
            self.inject(node, *path)

    def select(self, *path: str) -> Aggregation | None:
        """Return the descendant at `path`.

        Returns:
            Aggregation | None: Resolved node, or None when any segment is missing.

        """
        if not path:
            return None

        child = self._children.get(path[0])
        if child is None or len(path) == 1:
            return child

        return child.select(*path[1:])

    def pop(self, *path: str) -> Aggregation | None:
        """Remove and return the descendant at `path`.

        Nothing is mutated when resolution fails.

        Returns:
            Aggregation | None: Removed node, or None when any segment is missing.

        """
        if not path:
            return None

        child = self._children.get(path[0])
        if child is None:
            return None

        if len(path) == 1:
            del self._children[path[0]]
            return child

        return child.pop(*path[1:])

    def export(self) -> Sourceable | None:
        """Return the bound owner without traversing children."""
        return self._root


def _compose_source(
    kind: AggregationKind,
    options: Any,
    *,
    children: dict[str, Aggregation],
    meta: dict[str, Any] | None,
) -> dict[str, Any]:
    source: dict[str, Any] = {kind.value: options}

    if children:
        source[_AGGREGATIONS_KEY] = {name: child.source() for name, child in children.items()}

    if meta:
        source[_META_KEY] = meta

    return source


class TreeAggregation(Aggregation):
    """Base class for aggregation kinds that may nest sub-aggregations."""

    kind: AggregationKind

    def __init__(self) -> None:
        """Create the node with an empty sub-aggregation mapping."""
        self._tree = Tree(self)
        self._meta: dict[str, Any] | None = None

    def get_all_subs(self) -> dict[str, Aggregation]:
        return self._tree.get_all_subs()

    def inject(self, node: Aggregation, *path: str) -> None:
        self._tree.inject(node, *path)

    def inject_x(self, node: Aggregation, *path: str) -> None:
        self._tree.inject_x(node, *path)

    def select(self, *path: str) -> Aggregation | None:
        return self._tree.select(*path)

    def pop(self, *path: str) -> Aggregation | None:
        return self._tree.pop(*path)

    def export(self) -> Sourceable | None:
        return self._tree.export()

    def sub_aggregation(self, name: str, node: Aggregation) -> Self:
        """Attach `node` as a direct child named `name`."""
        self._tree.inject(node, name)
        return self

    def meta(self, meta: dict[str, Any]) -> Self:
        """Set the meta data to be included in the aggregation response."""
        self._meta = meta
        return self

    def source(self) -> dict[str, Any]:
        """Render `{kind: options}` plus sub-aggregations and meta data.

        Raises:
            AggTreeError: If this node or any descendant cannot render itself.

        Returns:
            dict[str, Any]: Aggregation body.

        """
        return _compose_source(
            self.kind,
            self._options(),
            children=self._tree.get_all_subs(),
            meta=self._meta,
        )

    @abstractmethod
    def _options(self) -> Any:
        """Render this kind's own options, children excluded."""


class FiniteAggregation(Aggregation):
    """Base class for leaf-only aggregation kinds such as pipelines.

    Finite aggregations never hold sub-aggregations: lookups always miss
    and injections are refused.
    """

    kind: AggregationKind

    def __init__(self) -> None:
        """Create the leaf node."""
        self._meta: dict[str, Any] | None = None

    def get_all_subs(self) -> dict[str, Aggregation]:
        return {}

    def inject(self, node: Aggregation, *path: str) -> None:  # noqa: ARG002
        if not path:
            raise NoPathError
        raise AggIsNotInjectableError(path)

    def inject_x(self, node: Aggregation, *path: str) -> None:
        self.inject(node, *path)

    def select(self, *path: str) -> Aggregation | None:  # noqa: ARG002
        return None

    def pop(self, *path: str) -> Aggregation | None:  # noqa: ARG002
        return None

    def export(self) -> Sourceable | None:
        return self

    def meta(self, meta: dict[str, Any]) -> Self:
        """Set the meta data to be included in the aggregation response."""
        self._meta = meta
        return self

    def source(self) -> dict[str, Any]:
        """Render `{kind: options}` plus meta data.

        Returns:
            dict[str, Any]: Aggregation body.

        """
        return _compose_source(self.kind, self._options(), children={}, meta=self._meta)

    @abstractmethod
    def _options(self) -> Any:
        """Render this kind's own options."""
