"""Search request bodies built from aggregation collections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from agg_tree.tree.collection import export_all

if TYPE_CHECKING:
    from agg_tree.tree.collection import Aggregations


class SearchRequestConfig(BaseModel):
    """Represent request options surrounding the aggregations.

    Args:
        size: Number of hits returned alongside the aggregations.
        query: Optional query document restricting the aggregated set.
        aggregations_key: Body key holding the aggregations.

    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=0, ge=0)
    query: dict[str, Any] | None = None
    aggregations_key: str = "aggs"


def build_search_body(
    aggregations: Aggregations | None,
    config: SearchRequestConfig | None = None,
) -> dict[str, Any]:
    """Render a search body from a collection of aggregation trees.

    Args:
        aggregations (Aggregations | None): Trees to render, possibly absent.
        config (SearchRequestConfig | None): Request options.

    Raises:
        AggTreeError: If any aggregation cannot render itself.

    Returns:
        dict[str, Any]: Backend search body.

    """
    config = config or SearchRequestConfig()
    body: dict[str, Any] = {"size": config.size}
    if config.query is not None:
        body["query"] = config.query

    rendered = {
        name: exported.source() for name, exported in export_all(aggregations).items() if exported is not None
    }
    if rendered:
        body[config.aggregations_key] = rendered

    return body
