"""Addressable, mutable aggregation trees for Elasticsearch/OpenSearch requests."""

from agg_tree.aggs import (
    AvgAggregation,
    AvgBucketAggregation,
    CardinalityAggregation,
    DiversifiedSamplerAggregation,
    ExtendedStatsAggregation,
    FilterAggregation,
    MaxAggregation,
    MaxBucketAggregation,
    MinAggregation,
    MinBucketAggregation,
    SamplerAggregation,
    SignificantTermsAggregation,
    StatsAggregation,
    SumAggregation,
    SumBucketAggregation,
    TermsAggregation,
    ValueCountAggregation,
)
from agg_tree.errors import (
    AggIsNotInjectableError,
    AggTreeError,
    InvalidAggregationError,
    NoPathError,
    PathNotSelectableError,
)
from agg_tree.tree import (
    Aggregation,
    Aggregations,
    FiniteAggregation,
    Sourceable,
    Tree,
    TreeAggregation,
    export_all,
    inject_into,
    inject_into_x,
    is_nil_tree,
)
from agg_tree.values import MatchAllQuery, RangeQuery, RawQuery, Script, TermQuery

__all__ = [
    "AggIsNotInjectableError",
    "AggTreeError",
    "Aggregation",
    "Aggregations",
    "AvgAggregation",
    "AvgBucketAggregation",
    "CardinalityAggregation",
    "DiversifiedSamplerAggregation",
    "ExtendedStatsAggregation",
    "FilterAggregation",
    "FiniteAggregation",
    "InvalidAggregationError",
    "MatchAllQuery",
    "MaxAggregation",
    "MaxBucketAggregation",
    "MinAggregation",
    "MinBucketAggregation",
    "NoPathError",
    "PathNotSelectableError",
    "RangeQuery",
    "RawQuery",
    "SamplerAggregation",
    "Script",
    "SignificantTermsAggregation",
    "Sourceable",
    "StatsAggregation",
    "SumAggregation",
    "SumBucketAggregation",
    "TermQuery",
    "TermsAggregation",
    "Tree",
    "TreeAggregation",
    "ValueCountAggregation",
    "export_all",
    "inject_into",
    "inject_into_x",
    "is_nil_tree",
]
