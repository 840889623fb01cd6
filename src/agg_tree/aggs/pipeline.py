"""Sibling pipeline aggregations.

Each computes one value across the buckets of a sibling multi-bucket
aggregation, addressed through `buckets_path`. Pipelines are leaves: they
never hold sub-aggregations.
"""

from __future__ import annotations

from typing import Any, Self

from agg_tree.domain import AggregationKind, GapPolicy
from agg_tree.tree.node import FiniteAggregation


class BucketMetricPipelineAggregation(FiniteAggregation):
    """Base class for the `*_bucket` sibling pipelines."""

    def __init__(self) -> None:
        """Create the pipeline without buckets paths."""
        super().__init__()
        self._format = ""
        self._gap_policy: GapPolicy | None = None
        self._buckets_paths: list[str] = []

    def format(self, value_format: str) -> Self:
        """Set the format applied to the output of this aggregation."""
        self._format = value_format
        return self

    def gap_policy(self, gap_policy: GapPolicy | str) -> Self:
        """Set what happens when a gap is found in the series."""
        self._gap_policy = GapPolicy(gap_policy)
        return self

    def gap_insert_zeros(self) -> Self:
        """Insert zeros for gaps in the series."""
        return self.gap_policy(GapPolicy.INSERT_ZEROS)

    def gap_skip(self) -> Self:
        """Skip gaps in the series."""
        return self.gap_policy(GapPolicy.SKIP)

    def buckets_path(self, *buckets_paths: str) -> Self:
        """Append paths to the buckets this pipeline reads."""
        self._buckets_paths.extend(buckets_paths)
        return self

    def _options(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self._format:
            params["format"] = self._format
        if self._gap_policy is not None:
            params["gap_policy"] = self._gap_policy.value

        if len(self._buckets_paths) == 1:
            params["buckets_path"] = self._buckets_paths[0]
        elif self._buckets_paths:
            params["buckets_path"] = list(self._buckets_paths)

        return params


class SumBucketAggregation(BucketMetricPipelineAggregation):
    """Sum a numeric metric across all buckets of a sibling aggregation."""

    kind = AggregationKind.SUM_BUCKET


class AvgBucketAggregation(BucketMetricPipelineAggregation):
    """Average a numeric metric across the buckets of a sibling aggregation."""

    kind = AggregationKind.AVG_BUCKET


class MinBucketAggregation(BucketMetricPipelineAggregation):
    """Find the bucket with the lowest value of a sibling metric."""

    kind = AggregationKind.MIN_BUCKET


class MaxBucketAggregation(BucketMetricPipelineAggregation):
    """Find the bucket with the highest value of a sibling metric."""

    kind = AggregationKind.MAX_BUCKET
