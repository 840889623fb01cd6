"""Protocols for search backends receiving rendered aggregation requests."""

from __future__ import annotations

from typing import Any, Protocol


class SearchBackend(Protocol):
    """Define a thin interface for Elasticsearch/OpenSearch aggregation calls."""

    backend_name: str

    def aggregate(self, *, index: str, body: dict[str, Any]) -> dict[str, Any]:
        """Execute an aggregation request.

        Args:
            index (str): Target index name.
            body (dict[str, Any]): Body built by `build_search_body`.

        Returns:
            dict[str, Any]: Raw backend response.

        """
