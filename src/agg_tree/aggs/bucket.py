"""Bucket aggregations, the usual intermediate nodes of a tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from agg_tree.aggs.metrics import ValuesSourceAggregation
from agg_tree.domain import AggregationKind
from agg_tree.errors import InvalidAggregationError
from agg_tree.tree.node import TreeAggregation

if TYPE_CHECKING:
    from agg_tree.tree.protocols import Sourceable
    from agg_tree.values import Script

_MISSING_FILTER_ERROR = "Filter aggregation requires a filter query."
_UNSET = -1


class FilterAggregation(TreeAggregation):
    """Narrow the aggregation context to the documents matching a filter.

    Renders e.g. `{"filter": {"range": {"stock": {"gt": 0}}}}`.
    """

    kind = AggregationKind.FILTER

    def __init__(self, filter_query: Sourceable | None = None) -> None:
        """Create the node, optionally with its filter query."""
        super().__init__()
        self._filter = filter_query

    def filter(self, filter_query: Sourceable) -> Self:
        """Set the query selecting the documents of the bucket."""
        self._filter = filter_query
        return self

    def _options(self) -> Any:
        if self._filter is None:
            raise InvalidAggregationError(_MISSING_FILTER_ERROR)
        return self._filter.source()


class SamplerAggregation(TreeAggregation):
    """Limit sub-aggregation processing to a sample of top-scoring documents."""

    kind = AggregationKind.SAMPLER

    def __init__(self) -> None:
        """Create the node with the engine's default shard size."""
        super().__init__()
        self._shard_size = _UNSET

    def shard_size(self, shard_size: int) -> Self:
        """Set the maximum number of docs sampled on each shard."""
        self._shard_size = shard_size
        return self

    def _options(self) -> dict[str, Any]:
        opts: dict[str, Any] = {}
        if self._shard_size >= 0:
            opts["shard_size"] = self._shard_size
        return opts


class DiversifiedSamplerAggregation(TreeAggregation):
    """Sample top-scoring documents while capping matches sharing one value.

    Like `sampler`, but at most `max_docs_per_value` sampled documents may
    share the same value of `field` (an "author", for instance). Negative
    integer options are left to the engine defaults.
    """

    kind = AggregationKind.DIVERSIFIED_SAMPLER

    def __init__(self) -> None:
        """Create the node with engine defaults."""
        super().__init__()
        self._field = ""
        self._script: Script | None = None
        self._shard_size = _UNSET
        self._max_docs_per_value = _UNSET
        self._execution_hint = ""

    def field(self, field: str) -> Self:
        """Set the field on which diversity is enforced."""
        self._field = field
        return self

    def script(self, script: Script) -> Self:
        """Set the script producing the values diversity is enforced on."""
        self._script = script
        return self

    def shard_size(self, shard_size: int) -> Self:
        """Set the maximum number of docs sampled on each shard."""
        self._shard_size = shard_size
        return self

    def max_docs_per_value(self, max_docs_per_value: int) -> Self:
        """Set how many sampled docs may share one value."""
        self._max_docs_per_value = max_docs_per_value
        return self

    def execution_hint(self, hint: str) -> Self:
        """Set how values are deduplicated, e.g. `map` or `global_ordinals`."""
        self._execution_hint = hint
        return self

    def _options(self) -> dict[str, Any]:
        opts: dict[str, Any] = {}
        if self._field:
            opts["field"] = self._field
        if self._script is not None:
            opts["script"] = self._script.source()
        if self._shard_size >= 0:
            opts["shard_size"] = self._shard_size
        if self._max_docs_per_value >= 0:
            opts["max_docs_per_value"] = self._max_docs_per_value
        if self._execution_hint:
            opts["execution_hint"] = self._execution_hint
        return opts


class TermsAggregation(ValuesSourceAggregation):
    """Build one bucket per unique value of a field."""

    kind = AggregationKind.TERMS

    def __init__(self) -> None:
        """Create the node with engine defaults."""
        super().__init__()
        self._size: int | None = None
        self._min_doc_count: int | None = None
        self._order: list[dict[str, str]] = []

    def size(self, size: int) -> Self:
        """Set how many buckets are returned."""
        self._size = size
        return self

    def min_doc_count(self, min_doc_count: int) -> Self:
        """Set the minimum document count for a bucket to be returned."""
        self._min_doc_count = min_doc_count
        return self

    def order(self, key: str, *, ascending: bool = True) -> Self:
        """Append a bucket ordering criterion, e.g. `_count` or a sub-aggregation name."""
        self._order.append({key: "asc" if ascending else "desc"})
        return self

    def _options(self) -> dict[str, Any]:
        opts = super()._options()
        if self._size is not None:
            opts["size"] = self._size
        if self._min_doc_count is not None:
            opts["min_doc_count"] = self._min_doc_count
        if len(self._order) == 1:
            opts["order"] = dict(self._order[0])
        elif self._order:
            opts["order"] = [dict(item) for item in self._order]
        return opts


class SignificantTermsAggregation(TreeAggregation):
    """Build buckets for terms unusually frequent in the current document set."""

    kind = AggregationKind.SIGNIFICANT_TERMS

    def __init__(self) -> None:
        """Create the node with engine defaults."""
        super().__init__()
        self._field = ""
        self._size: int | None = None
        self._min_doc_count: int | None = None

    def field(self, field: str) -> Self:
        """Set the field whose terms are scored."""
        self._field = field
        return self

    def size(self, size: int) -> Self:
        """Set how many buckets are returned."""
        self._size = size
        return self

    def min_doc_count(self, min_doc_count: int) -> Self:
        """Set the minimum document count for a term to be returned."""
        self._min_doc_count = min_doc_count
        return self

    def _options(self) -> dict[str, Any]:
        opts: dict[str, Any] = {}
        if self._field:
            opts["field"] = self._field
        if self._size is not None:
            opts["size"] = self._size
        if self._min_doc_count is not None:
            opts["min_doc_count"] = self._min_doc_count
        return opts
