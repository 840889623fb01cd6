from __future__ import annotations

from dataclasses import dataclass

import pytest

from agg_tree import (
    AggIsNotInjectableError,
    Aggregations,
    CardinalityAggregation,
    FilterAggregation,
    SamplerAggregation,
    SumBucketAggregation,
    TermQuery,
    TermsAggregation,
    ValueCountAggregation,
)
from agg_tree.search import SearchRequestConfig, build_search_backend, build_search_body

_SHARD_SIZE = 100


@dataclass
class _ClientStub:
    calls: list[tuple[str, dict[str, object]]]

    def search(self, *, index: str, body: dict[str, object]) -> dict[str, object]:
        self.calls.append((index, body))
        return {"aggregations": {}, "index": index}


def _collection() -> Aggregations:
    collection = Aggregations()
    collection.inject(FilterAggregation(TermQuery("lang", "fr")), "french")
    collection.inject(TermsAggregation().field("author"), "french", "authors")
    collection.inject_x(ValueCountAggregation().field("id"), "french", "authors", "docs")
    collection.inject(SamplerAggregation().shard_size(_SHARD_SIZE), "sample")
    collection.inject(CardinalityAggregation().field("author"), "sample", "distinct_authors")
    collection.inject(SumBucketAggregation().buckets_path("french>authors>docs"), "total_docs")
    return collection


def test_end2end_collection_is_rendered_and_sent() -> None:
    client = _ClientStub(calls=[])
    backend = build_search_backend(backend="elasticsearch", client=client)
    config = SearchRequestConfig(size=0, query={"match_all": {}})

    body = build_search_body(_collection(), config)
    backend.aggregate(index="docs", body=body)

    assert client.calls == [("docs", body)]
    assert body == {
        "size": 0,
        "query": {"match_all": {}},
        "aggs": {
            "french": {
                "filter": {"term": {"lang": "fr"}},
                "aggregations": {
                    "authors": {
                        "terms": {"field": "author"},
                        "aggregations": {"docs": {"value_count": {"field": "id"}}},
                    },
                },
            },
            "sample": {
                "sampler": {"shard_size": _SHARD_SIZE},
                "aggregations": {"distinct_authors": {"cardinality": {"field": "author"}}},
            },
            "total_docs": {"sum_bucket": {"buckets_path": "french>authors>docs"}},
        },
    }


def test_end2end_removed_trees_disappear_from_body() -> None:
    collection = _collection()

    collection.pop("sample")
    collection.pop("french", "authors")
    body = build_search_body(collection, SearchRequestConfig(aggregations_key="aggregations"))

    assert body == {
        "size": 0,
        "aggregations": {
            "french": {"filter": {"term": {"lang": "fr"}}},
            "total_docs": {"sum_bucket": {"buckets_path": "french>authors>docs"}},
        },
    }


def test_end2end_absent_collection_renders_bare_body() -> None:
    assert build_search_body(None) == {"size": 0}


def test_end2end_structural_errors_are_explicit() -> None:
    collection = _collection()

    with pytest.raises(AggIsNotInjectableError):
        collection.inject(ValueCountAggregation(), "unknown", "docs")

    with pytest.raises(AggIsNotInjectableError):
        collection.inject(ValueCountAggregation(), "total_docs", "docs")
