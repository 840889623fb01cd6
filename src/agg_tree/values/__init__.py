"""Script and query values consumed by aggregations."""

from agg_tree.values.query import MatchAllQuery, RangeQuery, RawQuery, TermQuery
from agg_tree.values.script import Script

__all__ = [
    "MatchAllQuery",
    "RangeQuery",
    "RawQuery",
    "Script",
    "TermQuery",
]
