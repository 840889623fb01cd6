"""Metrics aggregations computed over values of the aggregated documents.

These values are extracted either from a document field or generated by a
script. Metric nodes rarely nest, but they keep a sub-aggregation mapping
so every kind composes the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from agg_tree.domain import AggregationKind
from agg_tree.tree.node import TreeAggregation

if TYPE_CHECKING:
    from agg_tree.values import Script


class ValuesSourceAggregation(TreeAggregation):
    """Base class for kinds reading values from a field or a script."""

    def __init__(self) -> None:
        """Create the node without any values source."""
        super().__init__()
        self._field = ""
        self._script: Script | None = None
        self._format = ""

    def field(self, field: str) -> Self:
        """Set the field values are read from."""
        self._field = field
        return self

    def script(self, script: Script) -> Self:
        """Set the script producing the values."""
        self._script = script
        return self

    def format(self, value_format: str) -> Self:
        """Set the format applied to rendered values."""
        self._format = value_format
        return self

    def _options(self) -> dict[str, Any]:
        opts: dict[str, Any] = {}
        if self._field:
            opts["field"] = self._field
        if self._script is not None:
            opts["script"] = self._script.source()
        if self._format:
            opts["format"] = self._format
        return opts


class StatsAggregation(ValuesSourceAggregation):
    """Compute min, max, sum, count and avg of numeric values.

    Renders e.g. `{"stats": {"field": "grade"}}`.
    """

    kind = AggregationKind.STATS


class ExtendedStatsAggregation(ValuesSourceAggregation):
    """Compute stats plus variance, standard deviation and bounds."""

    kind = AggregationKind.EXTENDED_STATS

    def __init__(self) -> None:
        """Create the node without sigma."""
        super().__init__()
        self._sigma: float | None = None

    def sigma(self, sigma: float) -> Self:
        """Set how many standard deviations the bounds span."""
        self._sigma = sigma
        return self

    def _options(self) -> dict[str, Any]:
        opts = super()._options()
        if self._sigma is not None:
            opts["sigma"] = self._sigma
        return opts


class ValueCountAggregation(ValuesSourceAggregation):
    """Count the values extracted from the aggregated documents.

    Renders e.g. `{"value_count": {"field": "grade"}}`.
    """

    kind = AggregationKind.VALUE_COUNT


class SingleValueMetricAggregation(ValuesSourceAggregation):
    """Base class for avg, sum, min and max, which accept a `missing` value."""

    def __init__(self) -> None:
        """Create the node without a missing value."""
        super().__init__()
        self._missing: Any = None

    def missing(self, missing: Any) -> Self:
        """Set the value used for documents lacking the field."""
        self._missing = missing
        return self

    def _options(self) -> dict[str, Any]:
        opts = super()._options()
        if self._missing is not None:
            opts["missing"] = self._missing
        return opts


class AvgAggregation(SingleValueMetricAggregation):
    """Average numeric values."""

    kind = AggregationKind.AVG


class SumAggregation(SingleValueMetricAggregation):
    """Sum numeric values."""

    kind = AggregationKind.SUM


class MinAggregation(SingleValueMetricAggregation):
    """Return the minimum of numeric values."""

    kind = AggregationKind.MIN


class MaxAggregation(SingleValueMetricAggregation):
    """Return the maximum of numeric values."""

    kind = AggregationKind.MAX


class CardinalityAggregation(ValuesSourceAggregation):
    """Approximate the count of distinct values."""

    kind = AggregationKind.CARDINALITY

    def __init__(self) -> None:
        """Create the node with engine defaults."""
        super().__init__()
        self._precision_threshold: int | None = None
        self._rehash: bool | None = None

    def precision_threshold(self, threshold: int) -> Self:
        """Set the count below which counts are expected to be close to accurate."""
        self._precision_threshold = threshold
        return self

    def rehash(self, rehash: bool) -> Self:  # noqa: FBT001
        """Set whether values are rehashed before counting."""
        self._rehash = rehash
        return self

    def _options(self) -> dict[str, Any]:
        opts = super()._options()
        if self._precision_threshold is not None:
            opts["precision_threshold"] = self._precision_threshold
        if self._rehash is not None:
            opts["rehash"] = self._rehash
        return opts
