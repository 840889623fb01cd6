"""Factory helpers wrapping a caller-provided client into a search backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agg_tree.domain import BackendName
from agg_tree.errors import UnsupportedBackendError
from agg_tree.search.adapters import ElasticClientAdapter, OpenSearchClientAdapter

if TYPE_CHECKING:
    from agg_tree.search.protocols import SearchBackend


def supported_backends() -> tuple[BackendName, BackendName]:
    """Return backend names supported by the project."""
    return (BackendName.ELASTICSEARCH, BackendName.OPENSEARCH)


def build_search_backend(*, backend: BackendName | str, client: object) -> SearchBackend:
    """Wrap a pre-configured backend client into its adapter.

    Args:
        backend (BackendName | str): Backend identifier.
        client (object): Configured Elasticsearch or OpenSearch client.

    Raises:
        UnsupportedBackendError: If the backend identifier is unsupported.

    Returns:
        SearchBackend: Search backend adapter.

    """
    backend_name = backend.value if isinstance(backend, BackendName) else backend.strip().lower()

    if backend_name == BackendName.ELASTICSEARCH.value:
        return ElasticClientAdapter(client=client)

    if backend_name == BackendName.OPENSEARCH.value:
        return OpenSearchClientAdapter(client=client)

    supported = ", ".join(item.value for item in supported_backends())
    raise UnsupportedBackendError(backend=str(backend), supported=supported)
