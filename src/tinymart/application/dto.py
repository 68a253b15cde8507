"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogLineDTO:
    """Output: one catalog product as listed to the user."""

    id: int
    kind: str
    name: str
    price: str  # formatted, e.g. "$16.50"
    review_rate: float
    new_release: bool = False
