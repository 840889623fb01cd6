from __future__ import annotations

import pytest

from agg_tree import (
    DiversifiedSamplerAggregation,
    FilterAggregation,
    InvalidAggregationError,
    RangeQuery,
    SamplerAggregation,
    Script,
    SignificantTermsAggregation,
    StatsAggregation,
    TermsAggregation,
)

_SHARD_SIZE = 200
_MAX_DOCS = 3
_SIZE = 10


def test_filter_renders_query_children_and_meta() -> None:
    agg = FilterAggregation().filter(RangeQuery.between("stock", gt=0)).meta({"team": "catalog"})
    agg.inject(StatsAggregation().field("price"), "price_stats")

    assert agg.source() == {
        "filter": {"range": {"stock": {"gt": 0}}},
        "aggregations": {"price_stats": {"stats": {"field": "price"}}},
        "meta": {"team": "catalog"},
    }


def test_filter_without_query_cannot_render() -> None:
    with pytest.raises(InvalidAggregationError, match="requires a filter query"):
        FilterAggregation().source()


def test_sampler_renders_shard_size_only_when_set() -> None:
    assert SamplerAggregation().source() == {"sampler": {}}
    assert SamplerAggregation().shard_size(_SHARD_SIZE).source() == {"sampler": {"shard_size": _SHARD_SIZE}}


def test_diversified_sampler_defaults_render_nothing() -> None:
    assert DiversifiedSamplerAggregation().source() == {"diversified_sampler": {}}


def test_diversified_sampler_renders_all_options() -> None:
    agg = (
        DiversifiedSamplerAggregation()
        .field("author")
        .shard_size(_SHARD_SIZE)
        .max_docs_per_value(_MAX_DOCS)
        .execution_hint("map")
    )

    assert agg.source() == {
        "diversified_sampler": {
            "field": "author",
            "shard_size": _SHARD_SIZE,
            "max_docs_per_value": _MAX_DOCS,
            "execution_hint": "map",
        },
    }


def test_diversified_sampler_zero_values_are_rendered() -> None:
    agg = DiversifiedSamplerAggregation().shard_size(0).max_docs_per_value(0)

    assert agg.source() == {"diversified_sampler": {"shard_size": 0, "max_docs_per_value": 0}}


def test_diversified_sampler_renders_script_mapping() -> None:
    agg = DiversifiedSamplerAggregation().script(Script(script="author-id", type="stored"))

    assert agg.source() == {"diversified_sampler": {"script": {"id": "author-id"}}}


def test_terms_renders_size_min_doc_count_and_single_order() -> None:
    agg = TermsAggregation().field("tokens").size(_SIZE).min_doc_count(1).order("_count", ascending=False)

    assert agg.source() == {
        "terms": {"field": "tokens", "size": _SIZE, "min_doc_count": 1, "order": {"_count": "desc"}},
    }


def test_terms_renders_multiple_orders_as_list() -> None:
    agg = TermsAggregation().field("tokens").order("_count", ascending=False).order("_key")

    assert agg.source()["terms"]["order"] == [{"_count": "desc"}, {"_key": "asc"}]


def test_significant_terms_renders_options() -> None:
    agg = SignificantTermsAggregation().field("tokens").size(_SIZE).min_doc_count(2)

    assert agg.source() == {"significant_terms": {"field": "tokens", "size": _SIZE, "min_doc_count": 2}}
