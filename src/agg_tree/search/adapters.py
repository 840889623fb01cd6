"""Adapters implementing the thin SearchBackend interface.

Adapters wrap a client the caller has already configured; connection and
transport settings stay with that client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ElasticClientAdapter:
    """Thin adapter around an `elasticsearch.Elasticsearch` client."""

    client: Any
    backend_name: str = "elasticsearch"

    def aggregate(self, *, index: str, body: dict[str, Any]) -> dict[str, Any]:
        """Execute an aggregation request.

        Args:
            index (str): Target index name.
            body (dict[str, Any]): Body built by `build_search_body`.

        Returns:
            dict[str, Any]: Raw backend response payload.

        """
        return dict(self.client.search(index=index, body=body))


@dataclass(frozen=True, slots=True)
class OpenSearchClientAdapter:
    """Thin adapter around an `opensearchpy.OpenSearch` client."""

    client: Any
    backend_name: str = "opensearch"

    def aggregate(self, *, index: str, body: dict[str, Any]) -> dict[str, Any]:
        """Execute an aggregation request.

        Args:
            index (str): Target index name.
            body (dict[str, Any]): Body built by `build_search_body`.

        Returns:
            dict[str, Any]: Raw backend response payload.

        """
        return dict(self.client.search(index=index, body=body))
