"""Price list exception hierarchy.

Each failure kind of the fetch-and-parse pipeline has its own type so
callers that care can tell an unreachable sheet from an empty one.
"""

from __future__ import annotations


class PriceListError(Exception):
    """Base exception for pipeline failures."""

    kind = "error"


class PriceListConfigError(PriceListError):
    """Raised for an invalid sheet source or layout."""

    kind = "config"


class SheetTransportError(PriceListError):
    """Raised when the export endpoint is unreachable or answers non-2xx."""

    kind = "transport"


class SheetShapeError(PriceListError):
    """Raised when the CSV body has no data lines after the header."""

    kind = "shape"


class SheetContentError(PriceListError):
    """Raised when no data row survives validation."""

    kind = "content"
