"""Project-specific exceptions for agg-tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def _format_path(path: Sequence[str]) -> str:
    return "/".join(path)


class AggTreeError(Exception):
    """Base exception for the project."""


class NoPathError(ValueError, AggTreeError):
    """Raised when a structural operation receives an empty path."""

    def __init__(self) -> None:
        """Build exception payload for empty paths."""
        super().__init__("no path")


class PathNotSelectableError(LookupError, AggTreeError):
    """Raised when an intermediate path segment does not resolve to a present node."""

    def __init__(self, path: Sequence[str]) -> None:
        """Build exception payload for unresolvable intermediate paths."""
        self.path = tuple(path)
        super().__init__(f"path is not selectable: '{_format_path(path)}'")


class AggIsNotInjectableError(LookupError, AggTreeError):
    """Raised when a target cannot receive an injected aggregation."""

    def __init__(self, path: Sequence[str] = ()) -> None:
        """Build exception payload for non-injectable targets."""
        self.path = tuple(path)
        if self.path:
            super().__init__(f"agg is not injectable: '{_format_path(path)}'")
        else:
            super().__init__("agg is not injectable")


class InvalidAggregationError(ValueError, AggTreeError):
    """Raised when an aggregation or value cannot render its own configuration."""


class UnsupportedBackendError(ValueError, AggTreeError):
    """Raised when the user asks for an unsupported backend."""

    def __init__(self, backend: str, supported: str) -> None:
        """Build exception payload for unsupported backend values."""
        super().__init__(f"Unsupported backend '{backend}'. Supported values: {supported}.")

