"""Concrete aggregation kinds."""

from agg_tree.aggs.bucket import (
    DiversifiedSamplerAggregation,
    FilterAggregation,
    SamplerAggregation,
    SignificantTermsAggregation,
    TermsAggregation,
)
from agg_tree.aggs.metrics import (
    AvgAggregation,
    CardinalityAggregation,
    ExtendedStatsAggregation,
    MaxAggregation,
    MinAggregation,
    StatsAggregation,
    SumAggregation,
    ValueCountAggregation,
)
from agg_tree.aggs.pipeline import (
    AvgBucketAggregation,
    MaxBucketAggregation,
    MinBucketAggregation,
    SumBucketAggregation,
)

__all__ = [
    "AvgAggregation",
    "AvgBucketAggregation",
    "CardinalityAggregation",
    "DiversifiedSamplerAggregation",
    "ExtendedStatsAggregation",
    "FilterAggregation",
    "MaxAggregation",
    "MaxBucketAggregation",
    "MinAggregation",
    "MinBucketAggregation",
    "SamplerAggregation",
    "SignificantTermsAggregation",
    "StatsAggregation",
    "SumAggregation",
    "SumBucketAggregation",
    "TermsAggregation",
    "ValueCountAggregation",
]
