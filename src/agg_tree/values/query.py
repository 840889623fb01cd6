"""Minimal query values usable as aggregation filters."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Any


@dataclass(frozen=True, slots=True)
class RawQuery:
    """Wrap an already-built query document."""

    body: dict[str, Any]

    def source(self) -> dict[str, Any]:
        """Return a shallow copy of the wrapped document."""
        return dict(self.body)


@dataclass(frozen=True, slots=True)
class MatchAllQuery:
    """Match every document."""

    def source(self) -> dict[str, Any]:
        """Render the `match_all` document."""
        return {"match_all": {}}


@dataclass(frozen=True, slots=True)
class TermQuery:
    """Match documents whose `field` holds exactly `value`."""

    field: str
    value: Any

    def source(self) -> dict[str, Any]:
        """Render the `term` document."""
        return {"term": {self.field: self.value}}


@dataclass(frozen=True, slots=True)
class RangeQuery:
    """Match documents whose `field` falls within the given bounds.

    Bounds left as None are not rendered.
    """

    field: str
    bounds: dict[str, Any] = dataclass_field(default_factory=dict)

    @classmethod
    def between(
        cls,
        field_name: str,
        *,
        gt: Any = None,
        gte: Any = None,
        lt: Any = None,
        lte: Any = None,
    ) -> RangeQuery:
        """Build a range query from optional bounds."""
        candidates = {"gt": gt, "gte": gte, "lt": lt, "lte": lte}
        return cls(field=field_name, bounds={key: value for key, value in candidates.items() if value is not None})

    def source(self) -> dict[str, Any]:
        """Render the `range` document with the set bounds."""
        return {"range": {self.field: dict(self.bounds)}}
