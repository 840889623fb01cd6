"""Protocols for the plain, non-addressable aggregation representation."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sourceable(Protocol):
    """Define anything that renders itself into a request document fragment."""

    def source(self) -> Any:
        """Render this object's own configuration.

        Raises:
            AggTreeError: If the configuration cannot be rendered.

        Returns:
            Any: JSON-serializable document fragment.

        """
