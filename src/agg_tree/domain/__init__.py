"""Domain enumerations for agg-tree."""

from agg_tree.domain.enums import AggregationKind, BackendName, GapPolicy, ScriptType

__all__ = [
    "AggregationKind",
    "BackendName",
    "GapPolicy",
    "ScriptType",
]
