"""Search backend interfaces, adapters and request bodies."""

from agg_tree.search.adapters import ElasticClientAdapter, OpenSearchClientAdapter
from agg_tree.search.factory import build_search_backend, supported_backends
from agg_tree.search.protocols import SearchBackend
from agg_tree.search.request import SearchRequestConfig, build_search_body

__all__ = [
    "ElasticClientAdapter",
    "OpenSearchClientAdapter",
    "SearchBackend",
    "SearchRequestConfig",
    "build_search_backend",
    "build_search_body",
    "supported_backends",
]
