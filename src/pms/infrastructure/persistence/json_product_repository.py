"""JSON-file-backed implementation of ProductRepository.

The file holds ``{"next_id": N, "products": [...]}``. ``next_id`` is a
high-water mark: it only grows, so the ID of a deleted product is never
handed out again. Files holding a bare product array are still read.
"""

from __future__ import annotations

import json
import logging
import os
from decimal import Decimal
from pathlib import Path

from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money, StockQuantity
from pms.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return self._next_id(self._load_document())

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_document()["products"]:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_document()["products"]]

    def save(self, product: Product) -> None:
        document = self._load_document()
        products = document["products"]

        if product.id is None:
            product.id = self._next_id(document)

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(products):
            if raw["id"] == product.id:
                products[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            products.append(self._to_raw(product))

        document["next_id"] = max(self._next_id(document), product.id + 1)
        self._persist_document(document)

    def delete(self, product_id: int) -> bool:
        document = self._load_document()
        products = document["products"]
        remaining = [raw for raw in products if raw["id"] != product_id]
        if len(remaining) == len(products):
            return False
        # Pin the high-water mark before the highest ID can disappear
        document["next_id"] = self._next_id(document)
        document["products"] = remaining
        self._persist_document(document)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(document: dict) -> int:
        highest = max((p["id"] for p in document["products"]), default=0)
        return max(highest + 1, document.get("next_id", 1))

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "quantity": product.quantity.value,
            "description": product.description,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=StockQuantity(raw.get("quantity", 0)),
            description=raw.get("description", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_document(self) -> dict:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if isinstance(raw, list):
            return {"products": raw}
        return raw

    def _persist_document(self, document: dict) -> None:
        # Write a sibling file and swap it in, so a crash never leaves half a document
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_document({"next_id": 1, "products": []})
            logger.debug("Created product store at %s", self._file_path)
