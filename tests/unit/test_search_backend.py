from __future__ import annotations

from dataclasses import dataclass

import pytest

from agg_tree.domain import BackendName
from agg_tree.errors import UnsupportedBackendError
from agg_tree.search.adapters import ElasticClientAdapter, OpenSearchClientAdapter
from agg_tree.search.factory import build_search_backend, supported_backends


@dataclass
class _SearchClientStub:
    calls: list[tuple[str, dict[str, object]]]

    def search(self, *, index: str, body: dict[str, object]) -> dict[str, object]:
        self.calls.append((index, body))
        return {"ok": True, "index": index, "body": body}


def test_supported_backends_returns_expected_values() -> None:
    assert supported_backends() == (BackendName.ELASTICSEARCH, BackendName.OPENSEARCH)


def test_build_search_backend_wraps_the_given_client() -> None:
    client = _SearchClientStub(calls=[])

    elastic = build_search_backend(backend="Elasticsearch ", client=client)
    opensearch = build_search_backend(backend=BackendName.OPENSEARCH, client=client)

    assert isinstance(elastic, ElasticClientAdapter)
    assert isinstance(opensearch, OpenSearchClientAdapter)
    assert elastic.client is client
    assert opensearch.client is client


def test_build_search_backend_requires_a_client() -> None:
    with pytest.raises(TypeError):
        build_search_backend(backend="elasticsearch")  # type: ignore[call-arg]


def test_build_search_backend_rejects_unsupported_backend() -> None:
    with pytest.raises(UnsupportedBackendError, match="Unsupported backend 'solr'"):
        build_search_backend(backend="solr", client=_SearchClientStub(calls=[]))


@pytest.mark.parametrize(
    ("adapter_class", "backend_name"),
    [(ElasticClientAdapter, "elasticsearch"), (OpenSearchClientAdapter, "opensearch")],
)
def test_adapter_aggregate_delegates_to_client_search(adapter_class, backend_name: str) -> None:
    client = _SearchClientStub(calls=[])
    adapter = adapter_class(client=client)
    body = {"size": 0, "aggs": {"count": {"value_count": {"field": "id"}}}}

    response = adapter.aggregate(index="idx", body=body)

    assert adapter.backend_name == backend_name
    assert client.calls == [("idx", body)]
    assert response["body"] == body
