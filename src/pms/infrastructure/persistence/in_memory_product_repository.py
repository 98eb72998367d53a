"""Dict-backed implementation of ProductRepository.

Keeps products for the lifetime of the process only. Stored and
returned products are copies, so callers cannot change the store by
mutating what they were handed. All access goes through one lock, so
concurrent callers never share an ID.
"""

from __future__ import annotations

import threading
from dataclasses import replace

from pms.domain.model.product import Product
from pms.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        for p in products or []:
            self.save(p)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._store.get(product_id)
            return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        with self._lock:
            return [replace(p) for p in self._store.values()]

    def save(self, product: Product) -> None:
        with self._lock:
            if product.id is None:
                product.id = self._next_id
            # IDs are never reused, even after a delete
            self._next_id = max(self._next_id, product.id + 1)
            self._store[product.id] = replace(product)

    def delete(self, product_id: int) -> bool:
        with self._lock:
            return self._store.pop(product_id, None) is not None
