"""The product management contract.

Callers (the CLI, a future API layer) depend on this abstraction only.
``ProductService`` is the implementation backed by a repository; tests
are free to substitute their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pms.application.dto import ProductSpec
from pms.domain.model.product import Product


class ProductManager(ABC):

    @abstractmethod
    def add_product(self, spec: ProductSpec) -> Product:
        """Persist a new product and return it with its assigned ID.

        Raises ValidationError if the input is malformed.
        """

    @abstractmethod
    def get_all_products(self) -> list[Product]:
        """Return every persisted product."""

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Product:
        """Return the product with this ID.

        Raises NotFoundError if there is none.
        """

    @abstractmethod
    def update_product(self, product_id: int, spec: ProductSpec) -> Product:
        """Merge the supplied fields into an existing product.

        Raises NotFoundError if the ID is unknown (nothing is created)
        and ValidationError if a supplied field is invalid (nothing is
        stored).
        """

    @abstractmethod
    def delete_product(self, product_id: int) -> str:
        """Remove a product and return a confirmation message.

        Raises NotFoundError if the ID is unknown.
        """
