"""Application service: product CRUD backed by a ProductRepository.

Holds no state of its own; every call is a single round trip to the
repository, which owns identifiers and storage lifetime.
"""

from __future__ import annotations

import logging

from pms.application.dto import ProductSpec
from pms.application.product_manager import ProductManager
from pms.domain.exceptions import NotFoundError
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money, StockQuantity
from pms.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(ProductManager):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def add_product(self, spec: ProductSpec) -> Product:
        product = Product.create(
            name=spec.name,  # type: ignore[arg-type]
            price=Money.of(spec.price if spec.price is not None else 0),
            quantity=StockQuantity.of(spec.quantity if spec.quantity is not None else 0),
            description=spec.description if spec.description is not None else "",
        )
        self._product_repo.save(product)
        logger.info("Added product #%s '%s'", product.id, product.name)
        return product

    def get_all_products(self) -> list[Product]:
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id)
        logger.debug("Listed %d products", len(products))
        return products

    def get_product_by_id(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def update_product(self, product_id: int, spec: ProductSpec) -> Product:
        """Update the fields present in *spec*.

        A fresh Product is built from the merged values and validated
        in full before anything is written, so a rejected update leaves
        the stored record as it was.
        """
        current = self.get_product_by_id(product_id)

        updated = Product.create(
            name=spec.name if spec.name is not None else current.name,
            price=Money.of(spec.price) if spec.price is not None else current.price,
            quantity=(
                StockQuantity.of(spec.quantity)
                if spec.quantity is not None
                else current.quantity
            ),
            description=(
                spec.description if spec.description is not None else current.description
            ),
        )
        updated.id = current.id
        self._product_repo.save(updated)
        logger.info("Updated product #%s", product_id)
        return updated

    def delete_product(self, product_id: int) -> str:
        if not self._product_repo.delete(product_id):
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("Deleted product #%s", product_id)
        return f"Product #{product_id} deleted"
