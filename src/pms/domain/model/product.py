"""Product aggregate.

The only entity in the catalog. Its identifier belongs to the
repository: ``id`` is ``None`` until the product is first saved.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pms.domain.exceptions import ValidationError
from pms.domain.model.value_objects import Money, StockQuantity


@dataclass
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products; it enforces
    the naming rules. The ``__init__`` stays simple so repositories can
    reconstitute stored products without re-validating.
    """

    name: str
    price: Money
    quantity: StockQuantity = field(default_factory=lambda: StockQuantity(0))
    description: str = ""
    id: int | None = None

    @classmethod
    def create(
        cls,
        name: str,
        price: Money,
        quantity: StockQuantity | None = None,
        description: str = "",
    ) -> Product:
        return cls(
            name=_clean_name(name),
            price=price,
            quantity=quantity if quantity is not None else StockQuantity(0),
            description=_clean_description(description),
        )


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def _clean_description(description: str) -> str:
    if not isinstance(description, str):
        raise ValidationError(
            f"Product description must be text, got {type(description).__name__}"
        )
    return description
