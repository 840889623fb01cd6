"""Addressable aggregation trees."""

from agg_tree.tree.collection import Aggregations, export_all, inject_into, inject_into_x
from agg_tree.tree.node import Aggregation, FiniteAggregation, Tree, TreeAggregation, is_nil_tree
from agg_tree.tree.protocols import Sourceable

__all__ = [
    "Aggregation",
    "Aggregations",
    "FiniteAggregation",
    "Sourceable",
    "Tree",
    "TreeAggregation",
    "export_all",
    "inject_into",
    "inject_into_x",
    "is_nil_tree",
]
