"""Typed enumerations for aggregation kinds and their options."""

from __future__ import annotations

from enum import StrEnum


class AggregationKind(StrEnum):
    """Represent the aggregation kinds rendered by this package.

    Each value is the key under which the kind's options are rendered.
    """

    STATS = "stats"
    EXTENDED_STATS = "extended_stats"
    VALUE_COUNT = "value_count"
    AVG = "avg"
    SUM = "sum"
    MIN = "min"
    MAX = "max"
    CARDINALITY = "cardinality"
    FILTER = "filter"
    SAMPLER = "sampler"
    DIVERSIFIED_SAMPLER = "diversified_sampler"
    TERMS = "terms"
    SIGNIFICANT_TERMS = "significant_terms"
    SUM_BUCKET = "sum_bucket"
    AVG_BUCKET = "avg_bucket"
    MIN_BUCKET = "min_bucket"
    MAX_BUCKET = "max_bucket"


class GapPolicy(StrEnum):
    """Represent pipeline policies for gaps in a bucket series."""

    INSERT_ZEROS = "insert_zeros"
    SKIP = "skip"


class ScriptType(StrEnum):
    """Represent how a script is referenced."""

    INLINE = "inline"
    STORED = "stored"


class BackendName(StrEnum):
    """Represent supported search backends."""

    ELASTICSEARCH = "elasticsearch"
    OPENSEARCH = "opensearch"
