"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductSpec:
    """Input: product fields as supplied by a caller.

    ``None`` means "not supplied". On add, missing fields fall back to
    defaults; on update, they leave the stored value unchanged.
    """

    name: str | None = None
    price: str | int | float | Decimal | None = None
    quantity: str | int | None = None
    description: str | None = None
